from stackseed.pipeline import main

main()
