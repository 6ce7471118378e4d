import argparse
import logging
import sys

from kumihan.config import ParserConfig, RendererConfig
from kumihan.constants import DEFAULT_INDENT_WIDTH, DEFAULT_OUTPUT_INDENT
from kumihan.converter import convert, parse
from kumihan.errors import KumihanError
from kumihan.node import print_tree

# recursion limit increase for dumping deep trees with --tree
sys.setrecursionlimit(5000)


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        description="Convert indentation markup into indented HTML."
    )
    argparser.add_argument("source")
    argparser.add_argument("-o", "--output")
    argparser.add_argument("--indent-width", type=int, default=DEFAULT_INDENT_WIDTH)
    argparser.add_argument("--output-indent", type=int, default=len(DEFAULT_OUTPUT_INDENT))
    argparser.add_argument("--strict", action="store_true")
    argparser.add_argument("--tree", action="store_true")
    argparser.add_argument("-v", "--verbose", action="store_true")
    return argparser


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with open(args.source, encoding="utf-8") as f:
            source = f.read()
        parser_config = ParserConfig(
            indent_width=args.indent_width,
            strict_indentation=args.strict,
        )
        if args.tree:
            for node in parse(source, parser_config):
                print_tree(node)
            return 0
        html = convert(
            source,
            parser_config=parser_config,
            renderer_config=RendererConfig(indent=" " * args.output_indent),
        )
    except (KumihanError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(html)
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
