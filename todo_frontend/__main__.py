from todo_frontend.console import main

main()
