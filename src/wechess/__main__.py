from wechess.app import main

main()
