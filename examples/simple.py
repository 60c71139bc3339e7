import sys

from guitar_tab import parse

text = """[Verse]
Em     C
Hello  world
"""
document = parse(text)

# Access sections
sys.stdout.write(document.sections[0].header.name + "\n")  # "Verse"

# Chord lines carry parsed chords that can be turned into pitch classes
for line in document.sections[0].contents.lines:
    for chord in line.chords:
        sys.stdout.write(f"{chord.text} -> {chord.to_unbound().notes_string()}\n")
