from electronize_cli import main

main()
