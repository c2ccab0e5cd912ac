from namefreq.cli import main

main()
