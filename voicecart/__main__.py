"""Entry point for `python -m voicecart`.

    python -m voicecart                  run the console loop
    python -m voicecart -parse TEXT...   print how TEXT parses, in test_cases.txt format
"""

import sys


def _parse_cmd(text):
    """Parse a single input and print the result in test_cases.txt format."""
    from voicecart.commands import parse_command

    command = parse_command(text)
    print(f"> {text}")
    print(f"action: {command.action}")
    for key, val in command.args.items():
        if val is None:
            print(f"{key}: none")
        else:
            print(f"{key}: {val}")


if __name__ == "__main__" or not sys.argv[0]:
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(" ".join(sys.argv[2:]))
    else:
        from voicecart.main import main
        main()
