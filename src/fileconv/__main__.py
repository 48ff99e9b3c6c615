from fileconv.cli import main

main()
