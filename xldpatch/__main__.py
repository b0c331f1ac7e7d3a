# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["show", "merge", "apply", "export", "add"]
HELP_MESSAGE_VERBOSE = ("Usage: xldpatch [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: xldpatch --version\n"
                       "          xldpatch show -h\n"
                       "          xldpatch export 3DBCKGR0.XLD:2 patch.xlp\n"
                       "          xldpatch apply patch.xlp 3DBCKGR0.XLD\n"
                       "          xldpatch merge other.xlp patch.xlz" % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "show":
        from xldpatch.xlpshowapp import main
    elif cmd == "merge":
        from xldpatch.xlpmergeapp import main
    elif cmd == "apply":
        from xldpatch.xlpapplyapp import main
    elif cmd == "export":
        from xldpatch.xlpexportapp import main
    elif cmd == "add":
        from xldpatch.xlpaddapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        if cmd == '--config':
            # List all possible config options:
            from .args import print_config
            from .config import entrypoint_configurables
            print('All available config options, and their current values:\n',
                  file=sys.stderr)
            for entrypoint in entrypoint_configurables:
                print_config(entrypoint)
                print('', file=sys.stderr)
            sys.exit(1)
        else:
            sys.exit("Unrecognized command '%s'\n\n%s." %
                     (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m xldpatch <args>"
    sys.exit(main_dispatch())
