from fcmp.launcher import main

main()
