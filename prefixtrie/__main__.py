from prefixtrie.cli import main

main()
