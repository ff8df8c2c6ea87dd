# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "marimo",
#     "pluralchain",
# ]
#
# [tool.marimo.display]
# theme = "system"
# ///

import marimo

__generated_with = "0.19.4"
app = marimo.App(
    width="medium",
    app_title="Plural Chain Demo",
)

with app.setup:
    import marimo as mo

    from pluralchain import Plural


@app.cell
def title():
    mo.md("""
    # Plural Chain Demo
    """)
    return


@app.cell
def controls():
    count = mo.ui.slider(start=0, stop=10, value=1, label="Count")
    count
    return (count,)


@app.cell
def sentences(count):
    n = count.value
    _lines = [
        f"You have been dealt a hand of {Plural.num.s(n)('cards')}.",
        f"There {Plural.is_are.num.s(n)('lights')}.",
        f"I have {Plural.a.y_ies(n)('cherries')} at home.",
        f"I have written {Plural.num.is_es(n)('theses')}.",
        f"I see {Plural.num.same(n)('fish')} in the tank.",
        f"{Plural.num.s.was_were(n)('files')} up to date.",
    ]
    mo.md("\n".join(f"- {_line}" for _line in _lines))
    return


if __name__ == "__main__":
    app.run()
