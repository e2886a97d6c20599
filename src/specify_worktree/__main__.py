from specify_worktree import main

if __name__ == "__main__":
    main()
