#!/usr/bin/env python3
"""
Basic usage example for codepoet.

This example generates the body and import block of one source file,
showing how colliding package names, self references and forced aliases
are qualified.
"""

from codepoet import Package, Symbol, SymbolResolver, ToolConvention
from codepoet.utils.exceptions import ImportRegistryError


def render_imports(specs):
    """Render import specs the way a simple renderer would."""
    lines = ["import ("]
    for spec in specs:
        if spec.package_alias:
            lines.append(f'\t{spec.package_alias} "{spec.import_path}"')
        else:
            lines.append(f'\t"{spec.import_path}"')
    lines.append(")")
    return "\n".join(lines)


def main():
    """Demonstrate qualifier allocation for one generated file."""
    print("codepoet - Basic Usage Example")
    print("=" * 60)

    resolver = SymbolResolver.for_package("example.com/app/server", ToolConvention())

    # Seed an alias before anything references the package
    resolver.register_aliased_import("example.com/internal/log", "applog")

    body = [
        resolver.ensure_imported(Symbol("example.com/lib/fubar", "fubar", "Config")),
        resolver.ensure_imported(Symbol("example.org/fork/fubar", "fubar", "Config")),
        resolver.ensure_imported(Symbol.from_package(Package("log", "example.com/internal/log"), "Logger")),
        resolver.ensure_imported(Symbol("github.com/x/go-yaml/v3", "", "Node")),
        resolver.ensure_imported(Symbol("example.com/app/server", "server", "Handler")),
    ]

    print("\nReferences:")
    for reference in body:
        print(f"  {reference}")

    print("\nImport block:")
    print(render_imports(resolver.import_specs()))

    print("\nRe-binding an alias after first use aborts generation:")
    try:
        resolver.register_aliased_import("example.com/lib/fubar", "fb")
    except ImportRegistryError as e:
        print(f"  {e}")


if __name__ == "__main__":
    main()
