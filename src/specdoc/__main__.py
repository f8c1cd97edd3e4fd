from specdoc.cli import main

main()
