#!/usr/bin/env python3
"""
Profile-Specific Documents Example

This example loads one multi-document YAML source three times: without a
profile, with the "prod" profile, and with a custom acceptor.

What This Example Demonstrates:
- Flattening nested YAML into dotted property keys
- Baseline documents merged with profile-specific documents
- Negated profiles ("!prod") and custom acceptors
- Looking up where a value was defined

Running the Example:
    # From the project root
    ~/.venv/bin/python examples/01_basics/profiles_example.py
"""

import logging

# Add the project root to the path (project root is 2 levels up)
import pathlib
import sys

project_root = str(pathlib.Path(__file__).resolve().parents[2])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from yamlprops import ByteArrayResource, YamlPropertySourceLoader

APPLICATION_YML = b"""\
server:
  port: 8080
  hosts:
    - localhost
release: 2015-01-28
---
spring:
  profiles: prod
server:
  port: 80
  hosts:
    - app1.example.com
    - app2.example.com
---
spring:
  profiles: "!prod"
debug: true
"""


def show(title: str, source) -> None:
    """Print every property of a source with its origin."""
    print(f"=== {title} ===")
    if source is None:
        print("(no applicable documents)")
        return
    for name, value in source.items():
        print(f"{name} = {value!r}  [{source.get_origin(name)}]")
    print()


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
    )
    loader = YamlPropertySourceLoader()
    resource = ByteArrayResource(APPLICATION_YML, "application.yml")

    show("no profile", loader.load("application", resource))
    show("prod", loader.load("application", resource, "prod"))
    show("dev", loader.load("application", resource, "dev"))

    # Accept only documents that explicitly exclude prod
    show(
        "custom acceptor",
        loader.load("application", resource, "dev", lambda p: "!prod" in p),
    )


if __name__ == "__main__":
    main()
