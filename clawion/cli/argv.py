import sys


def flex_args(option_name: str, option_short: str | None = None) -> None:
    """Reorder argv so a global option precedes the subcommand.

    `clawion agent wake --mission m1 --agent a1` becomes
    `clawion --agent a1 agent wake --mission m1`.

    Args:
        option_name: Long option name (e.g., "agent" for "--agent")
        option_short: Short option name (e.g., "a" for "-a")
    """
    sys.argv[1:] = hoist_option(sys.argv[1:], option_name, option_short)


def hoist_option(args: list[str], option_name: str, option_short: str | None = None) -> list[str]:
    if not args:
        return args

    option_long = f"--{option_name}"
    option_flags = [option_long]
    if option_short:
        option_flags.append(f"-{option_short}")

    option_idx = None
    option_value = None

    for i, arg in enumerate(args):
        if arg in option_flags and i + 1 < len(args):
            option_idx = i
            option_value = args[i + 1]
            break
        if arg.startswith(f"{option_long}="):
            option_idx = i
            option_value = arg.split("=", 1)[1]
            break

    if option_idx is None or option_idx == 0:
        return args

    args_list = list(args)
    if args_list[option_idx] in option_flags:
        args_list.pop(option_idx + 1)
    args_list.pop(option_idx)
    return [option_long, option_value, *args_list]
