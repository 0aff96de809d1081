from tarjm.cli.main import main

main()
