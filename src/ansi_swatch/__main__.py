from ansi_swatch.cli.main import main

main()
