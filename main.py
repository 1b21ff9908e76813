# main.py
from week_logs.main import main


if __name__ == "__main__":
    main()
