from a11yscan.cli import main

main()
