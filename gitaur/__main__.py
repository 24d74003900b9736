from gitaur.cli import main

main()
