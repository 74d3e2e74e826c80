from __future__ import annotations
import sys

from . import compile as compile_cli
from . import compress as compress_cli
from . import decode as decode_cli
from . import view as view_cli

COMMANDS = {
    "compile": compile_cli.main,
    "compress": compress_cli.main,
    "decode": decode_cli.main,
    "view": view_cli.main,
}

USAGE = """\
usage: hif {compile,compress,decode,view} PATH... [options]
       hif PATH                      (équivalent à `hif view PATH`)

  compile   images -> .hif
  compress  .hif -> .hif.gz
  decode    .hif -> PNG (--out DIR)
  view      affiche un .hif
"""


def main(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        sys.stderr.write(USAGE)
        return 2
    if argv[0] in ("-h", "--help"):
        sys.stdout.write(USAGE)
        return 0
    cmd, rest = argv[0], argv[1:]
    if cmd in COMMANDS:
        return COMMANDS[cmd](rest)
    # comportement historique : `hif image.hif` ouvre la visionneuse
    return view_cli.main(argv)


if __name__ == "__main__":
    sys.exit(main())
