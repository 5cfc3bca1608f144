from store_probe.api.app import main

main()
