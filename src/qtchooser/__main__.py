import sys

from qtchooser.cli.cli import main

if __name__ == "__main__":
    main(["qtchooser", *sys.argv[1:]])
