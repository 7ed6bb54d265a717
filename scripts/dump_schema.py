#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

from graphql import print_schema

from block_editor.blocks.block_types import BlockTypeRegistry
from block_editor.content.registry import ContentTypeRegistry
from block_editor.schema.builder import build_schema


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the block editor GraphQL schema as SDL.")
    parser.add_argument("--blocks-dir", help="Directory of block type JSON definitions")
    parser.add_argument("--content-types-dir", help="Directory of content type JSON definitions")
    parser.add_argument("-o", "--output", help="Write the SDL to this file instead of stdout")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    block_types = BlockTypeRegistry()
    block_types.load_from_directory(args.blocks_dir)
    content_types = ContentTypeRegistry()
    content_types.load_from_directory(args.content_types_dir)

    sdl = print_schema(build_schema(block_types, content_types).schema)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        print(f"Saved schema to {args.output}")
    else:
        print(sdl)


if __name__ == "__main__":
    main()
