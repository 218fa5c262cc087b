import argparse
from commands import branch, log, make_head, delete, config


# The main entry point for gitdnd
def main():
    # The main parser
    parser = argparse.ArgumentParser(description="gitdnd: move or delete single commits in a git branch's history.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: branches
    branches_parser = subparsers.add_parser("branches", help="List local branches.")
    branches_parser.set_defaults(func=branch.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the commits a branch adds on top of its comparison base.")
    log_parser.add_argument("branch", nargs="?", help="The branch to show (defaults to the current branch).")
    log_parser.add_argument("-n", "--limit", type=int, help="Maximum number of commits to show (1-500).")
    log_parser.set_defaults(func=log.run)

    # Command: make-head
    make_head_parser = subparsers.add_parser("make-head", help="Move a commit to the tip of a branch.")
    make_head_parser.add_argument("branch", help="The branch to rewrite.")
    make_head_parser.add_argument("commit", help="The commit (full or abbreviated hash) to move to the tip.")
    make_head_parser.set_defaults(func=make_head.run)

    # Command: delete
    delete_parser = subparsers.add_parser("delete", help="Remove a commit from a branch's history.")
    delete_parser.add_argument("branch", help="The branch to rewrite.")
    delete_parser.add_argument("commit", help="The commit (full or abbreviated hash) to remove.")
    delete_parser.set_defaults(func=delete.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a gitdnd setting.")
    config_parser.add_argument("key", help="The configuration key (e.g., compare.base).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Parse the arguments
    args = parser.parse_args()

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
