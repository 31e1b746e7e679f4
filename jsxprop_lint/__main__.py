"""Allow ``python -m jsxprop_lint``."""

from jsxprop_lint.cli import run

if __name__ == "__main__":
    run()
