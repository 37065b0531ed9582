"""Entry point for `python -m stylegen`."""


def main():
    from stylegen.cli import main as cli_main
    cli_main()


if __name__ == "__main__":
    main()
