from examplegen.cli import main

main()
