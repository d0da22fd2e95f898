from rtt.adapters.textual.app import main

main()
