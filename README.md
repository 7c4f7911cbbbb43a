# kbopt

Analyse split keyboard layouts against a text corpus and search for better ones.

kbopt reads a layout of three rows of twelve keys plus six thumb keys, counts the
unigrams, bigrams and trigrams of a corpus (after lower-casing it), and reports:

- hand, row, column and finger usage, and the characters the layout lacks
- same-finger bigrams (SFBs)
- same-finger skipgrams (SFSs); the table lists those longer than 1.2U
- lateral stretch bigrams (LSBs)

With `-o` it runs simulated annealing, swapping keys that are neither empty nor
pinned to lower the same-finger bigram rate. It prints the best fitness each
time it improves, then the best layout with its hand usage, SFB and SFS reports,
and writes that layout to `best.kb` in the current directory.

## Installing

```
pip install .
```

## Running

Layouts are read from `data/layouts/`, corpora from `data/corpus/` and pin files
from `data/pins/`, relative to the current directory. No layouts, corpora or pin
files come with the package; you supply them.

```
kbopt -l qwerty.kb -c english.txt
kbopt -l qwerty.kb -c english.txt -o -g 5000 -f drop-slow -p thumbs.pin
```

Options:

| Flag | Meaning |
| ---- | ------- |
| `-h` | show usage |
| `-l` | layout file (required) |
| `-c` | corpus file (required) |
| `-o` | optimise the layout |
| `-p` | pins file naming keys the optimiser may not move (used with `-o`) |
| `-g` | number of generations, above 0 (default 1000) |
| `-f` | accept-worse schedule: `always`, `drop-slow`, `temp`, `drop-fast`, `never` (default `drop-slow`) |

Errors are printed and the command exits with status 1.

## Layout files

The first line names the geometry: `rowstag`, `ortho` or `colstag`. Then come
three lines of twelve keys and one line of six thumb keys, separated by
whitespace. Each key is a single character, `spc` for space or `no` for an empty
position.

```
colstag
q w e r t y  u i o p [ ]
a s d f g h  j k l ; ' #
z x c v b n  m , . / - =
      no spc no  no no no
```

## Pin files

Four lines shaped like a layout (twelve, twelve, twelve and six entries). `*`,
`x` or `X` pins a key in place; `.`, `_` or `-` leaves it free.

## Using it as a library

```python
from kbopt.corpus import load_corpus
from kbopt.layout import load_layout
from kbopt.analysis import analyze_hand_usage, analyze_sfbs, analyze_sfss, analyze_lsbs
from kbopt.textoutput import render_sfbs, render_sfss, render_lsbs
from kbopt.optimisation import optimise

corpus = load_corpus("english", "data/corpus/english.txt")
layout = load_layout("data/layouts/qwerty.kb")

print(analyze_hand_usage(layout, corpus))
print(render_sfbs(analyze_sfbs(layout, corpus)))
print(render_sfss(analyze_sfss(layout, corpus)))
print(render_lsbs(analyze_lsbs(layout, corpus)))

best = optimise(layout, corpus, 1000, "drop-slow")
best.save("best.kb")
```

`optimise` leaves the given layout unchanged and returns a new one; it accepts an
optional `random.Random` for reproducible runs. `layout.load_pins(path)` marks
keys the optimiser must not move. `simple_sfbs` and `simple_sfss` in
`kbopt.analysis` give the SFB and SFS rates as plain fractions.

## Tests

```
pip install .[test]
pytest
```