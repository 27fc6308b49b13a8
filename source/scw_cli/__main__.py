from scw_cli.cli import main

main()
