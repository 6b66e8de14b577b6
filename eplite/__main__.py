from eplite.cli.main import main

main()
