from demo_api.main import main

main()
