from verbquiz.main import main

main()
