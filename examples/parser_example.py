"""
Example usage of the Clausewitz script parser/serializer

This demonstrates how to:
1. Parse a script file and walk the document
2. Build a modified document (nodes are immutable)
3. Create script data from scratch and serialize it
4. Dump a document as JSON and load it back
5. Read and write a localisation file

Run from the repository root:
    python examples/parser_example.py
"""

import sys
from dataclasses import replace

sys.path.insert(0, '.')

from clausewitz_script import (
    SPACE_CONVENTION,
    Array,
    Block,
    Date,
    Document,
    Identifier,
    LocalisationPair,
    Number,
    Operator,
    Pair,
    String,
    from_json,
    parse_file,
    parse_localisation_file,
    serialize,
    serialize_localisation,
    to_json,
)
from clausewitz_script.services.serializer import format_key, format_scalar


# Example 1: Parse an existing script file
print("=" * 60)
print("Example 1: Parsing a country history file")
print("=" * 60)

history = parse_file("tests/samples/country_history.txt")

for item in history:
    if not isinstance(item, Pair):
        continue
    key = format_key(item.key)
    if isinstance(item.value, Block):
        print(f"{key} = {{ {len(item.value)} items }}")
        for child in item.value.pairs():
            print(f"    {format_key(child.key)} {child.operator} ...")
    elif isinstance(item.value, Array):
        print(f"{key} = {{ {len(item.value)} values }}")
    else:
        print(f"{key} {item.operator} {format_scalar(item.value)}")

provinces = next(item.value for item in history
                 if isinstance(item, Pair) and item.key == Identifier('owned_provinces'))
print(f"\nOwned provinces: {len(provinces)}")


# Example 2: Modify a document
print("\n" + "=" * 60)
print("Example 2: Changing the capital")
print("=" * 60)

items = list(history.items)
for i, item in enumerate(items):
    if isinstance(item, Pair) and item.key == Identifier('capital'):
        items[i] = replace(item, value=Number(65.0))

modified = Document(tuple(items))
print("\n" + serialize(modified).split("\n", 1)[0])


# Example 3: Create a document from scratch
print("\n" + "=" * 60)
print("Example 3: Creating an idea from scratch")
print("=" * 60)

idea = Document((
    Pair(Identifier('ideas'), Operator.EQ, Block((
        Pair(Identifier('country'), Operator.EQ, Block((
            Pair(Identifier('TST_rail_network'), Operator.EQ, Block((
                Pair(Identifier('picture'), Operator.EQ, Identifier('generic_production_bonus')),
                Pair(Identifier('start'), Operator.EQ, Date(1936, 1, 1)),
                Pair(Identifier('name'), Operator.EQ, String('Rail "Network"')),
                Pair(Identifier('states'), Operator.EQ, Array(tuple(Number(float(n)) for n in range(1, 40)))),
            ))),
        ))),
    ))),
))

print("\nTab convention:")
print(serialize(idea))
print("Space convention:")
print(serialize(idea, SPACE_CONVENTION.formatter))


# Example 4: JSON
print("=" * 60)
print("Example 4: Round trip through JSON")
print("=" * 60)

text = to_json(idea)
print(f"\nJSON is {len(text)} characters")
print(f"Loads back equal: {from_json(text) == idea}")


# Example 5: Localisation
print("\n" + "=" * 60)
print("Example 5: Localisation")
print("=" * 60)

loc = parse_localisation_file("tests/samples/english.yml")
print(f"\nLanguage: {loc.language}")
for key, value in loc.entries().items():
    print(f"  {key}: {value!r}")

loc = replace(loc, items=loc.items + (LocalisationPair('TST_rail_network', 'Rail Network', 0),))
print("\n" + serialize_localisation(loc).lstrip('\ufeff'))


print("=" * 60)
print("Examples complete!")
print("=" * 60)
