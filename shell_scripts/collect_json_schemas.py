#!/usr/bin/env python3

import json
from pathlib import Path

from pydantic import TypeAdapter
from randpass._conf import Settings
from randpass.criteria import PasswordCriteria


def execute(output_dir: str):
    for filename, schema in {
        Path(output_dir) / "criteria.json": TypeAdapter(PasswordCriteria).json_schema(),
        Path(output_dir) / "configuration.json": Settings.model_json_schema(),
    }.items():
        filename.write_text(json.dumps(schema, indent=2))
        print("generated", filename)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(
        prog="collect_json_schemas",
        description="Collects JSON schemas of the configuration file to a given folder.",
    )
    parser.add_argument("output_dir")
    args = parser.parse_args()

    execute(output_dir=args.output_dir)
