# main.py

from rollout_games.cli import main


if __name__ == "__main__":
    main()
