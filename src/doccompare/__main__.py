from doccompare.main import main

main()
