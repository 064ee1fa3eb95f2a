from numlist import main

main()
