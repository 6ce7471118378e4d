"""Entry points tying the pipeline together.

    source text -> LineClassifier -> TreeBuilder (LineParser per line)
                -> Renderer -> HTML text
"""
from kumihan.config import ParserConfig, RendererConfig
from kumihan.lexer import LineClassifier
from kumihan.node import Node
from kumihan.renderer import Renderer
from kumihan.tree import TreeBuilder


def parse(source: str, config: ParserConfig | None = None) -> list[Node]:
    config = config or ParserConfig()
    classifier = LineClassifier(config=config)
    builder = TreeBuilder(config=config)
    return builder.build(classifier.classify(source))


def convert(
    source: str,
    parser_config: ParserConfig | None = None,
    renderer_config: RendererConfig | None = None,
) -> str:
    nodes = parse(source, parser_config)
    renderer = Renderer(config=renderer_config or RendererConfig())
    return renderer.render(nodes)
