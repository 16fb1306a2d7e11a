from src.driver.line_driver import main

if __name__ == "__main__":
    main()
