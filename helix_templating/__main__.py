from helix_templating.cli import main

if __name__ == "__main__":
    main()
