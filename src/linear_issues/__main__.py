from linear_issues.cli import main

main()
