#!/usr/bin/env python3
"""Demonstration of GraphQL to JSON Schema conversion.

This script shows how to:
1. Parse GraphQL operations and types
2. Convert them to one draft-06 schema document
3. Inspect the diagnostics for skipped input
"""

from gql_jsonschema.core import SchemaConverter, parse_source

SOURCE = """
query RollDice($dice: Int!, $sides: Int = 6) {
  rollDice(numDice: $dice, numSides: $sides)
}

mutation CreateObjectWithName($name: String!) {
  createObject(input: {name: $name, age: 66}) {
    object {
      id
      name
      ...ObjectDetails
    }
  }
}

type Dice {
  sides: Int!
  faces: [Face]
}

enum Face { ONE TWO THREE }
"""


def main():
    print("=== GraphQL to JSON Schema Demo ===\n")

    print("1. Parsing GraphQL source...")
    document = parse_source(SOURCE)
    print(f"   Found {len(document.definitions)} definitions")

    print("\n2. Converting...")
    result = SchemaConverter().convert_document(document)
    print(result.to_json())

    print("\n3. Diagnostics:")
    if result.is_complete:
        print("   none")
    for diagnostic in result.diagnostics:
        print(f"   [{diagnostic.kind.value}] {diagnostic}")


if __name__ == "__main__":
    main()
