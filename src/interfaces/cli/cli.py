"""warroom CLIのエントリーポイント."""

from src.interfaces.cli.commands.warroom import warroom


main = warroom


if __name__ == "__main__":
    main()
