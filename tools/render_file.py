#!/usr/bin/env python3
from __future__ import annotations
import argparse, sys
from pathlib import Path

from metatable.services.render import parse_metadata, render_metadata_table, strip_metadata_from_text
from metatable.services.sanitizer import get_sanitizer
from metatable.services.splitter import decode, encode
from metatable.services.table import Layout
from metatable.utils.markdown import render_markdown

def main(argv=None):
    ap = argparse.ArgumentParser(description="Renderiza el front matter YAML de un fichero como tabla HTML")
    ap.add_argument("path", help="Fichero markdown con front matter (--- ... ---)")
    ap.add_argument("--layout", default=Layout.VERTICAL.value, choices=[l.value for l in Layout])
    ap.add_argument("--body", action="store_true", help="Añade el cuerpo renderizado tras la tabla")
    ap.add_argument("--strip", action="store_true", help="Sólo imprime el cuerpo sin front matter")
    ap.add_argument("--out", default=None, help="Fichero de salida (por defecto stdout)")
    args = ap.parse_args(argv)

    raw = Path(args.path).read_bytes()
    if args.strip:
        out = strip_metadata_from_text(raw)
    else:
        # sin front matter válido no hay tabla
        html = render_metadata_table(raw, args.layout) if parse_metadata(raw) is not None else b""
        if args.body:
            html += encode(render_markdown(decode(strip_metadata_from_text(raw))))
        out = get_sanitizer().sanitize(html)

    if args.out:
        Path(args.out).write_bytes(out)
        print(f"Escrito {args.out}")
    else:
        sys.stdout.buffer.write(out)
    return 0

if __name__ == "__main__":
    sys.exit(main())
