from tinysh.shell import main

main()
