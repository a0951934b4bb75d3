from guicalc.app import main

main()
