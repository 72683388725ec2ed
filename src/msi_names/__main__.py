"""Entry point for `python -m msi_names`."""

from msi_names.cli.app import app


def main():
    app(prog_name="msi-names")


if __name__ == "__main__":
    main()
