# wordlekit

A small five-letter word guessing game. Guess the hidden word in six tries.
After each guess, every letter is marked:

- **G**: the letter is in the word, in this spot
- **Y**: the letter is in the word, but in another spot
- **_**: the letter is not in the word, or already used up by other marks

Repeated letters are scored the way players expect. Greens are taken first.
Then only as many yellows are given as the answer still has unmatched copies
of that letter, from left to right.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

The package installs a `wordlekit` command that plays one game in the
terminal:

```
wordlekit words.txt
wordlekit words.txt --seed 42
wordlekit words.txt --answer crane
```

- `words` (required): a text file with one five-letter word on each line.
  Blank lines are skipped. Only words in this list are accepted as guesses.
- `--answer`: play against this answer instead of a random one.
- `--seed`: seed for the random choice of the answer.

The command prints a welcome line, then reads one guess per line from
standard input. After each line it prints a message, then one `G`/`Y`/`_` row
for every guess so far. It stops with `You won!` or `You lost!`, or when the
input ends. A word list that cannot be read or parsed, or an answer that is
not five characters, ends the command with a usage error.

## Using it as a library

### Words

```python
from wordlekit.word import Word

word = Word("hello")
str(word)                          # "hello"
word == "hello"                    # True
word.positions_with_count("l")     # ((2, 3), 2)
word.positions_with_count(ord("l"))  # same, given as a byte value
```

A `Word` holds exactly five bytes. It can be built from a `str`, `bytes` or
another `Word`. Any other length raises `ValueError`. Words compare and sort
bytewise, index to byte values, and can be hashed.

### Scoring a guess

```python
from wordlekit.game import WordResult, CharResult
from wordlekit.word import Word

scored = WordResult.compare_guess(Word("crane"), Word("candy"))
scored.result
# (CharResult.GREEN, CharResult.NONE, CharResult.YELLOW,
#  CharResult.YELLOW, CharResult.NONE)
```

`all_possible_results()` lists all 243 colour patterns a guess can get.

### Running a game

```python
from wordlekit.game import Game, load_word_list

words = load_word_list("words.txt")
game = Game("apple", words)

if game.is_guess_valid("crane"):
    scored = game.guess("crane")

game.round      # guesses made so far
game.history    # their WordResult values, in order
game.status     # GameStatus.INCOMPLETE, CORRECT or FAIL
```

- `Game.random(words, rng)` picks the answer at random from the list. `rng` is
  an optional `random.Random`. An empty list raises `ValueError`.
- `parse_word_list(text)` reads a list that is already in memory and returns
  it sorted.
- `game.possible_guesses` is the sorted list of allowed guesses.
- A game allows six guesses. A seventh raises `GameOverError`.

### The text front end

`WordleApp` wraps a game for an interactive front end:

```python
from wordlekit.app import WordleApp

app = WordleApp(game)
message = app.submit("crane")   # feedback for the player
app.rows()                      # one "G"/"Y"/"_" row per guess so far
app.outcome()                   # "You won!", "You lost!" or None
```

### Choosing a guess

`wordlekit.strategy` helps narrow down the answer:

- `new_possibility_space(context, space)`: the words that, as the answer,
  would have given the scored guess `context`
- `new_possibility_space_size(context, space)`: how many there are
- `entropy(word, space)`: the expected information, in bits, from guessing
  `word` when the answer is one of `space`
- `max_information(space)`: the word in `space` with the highest entropy; the
  first one wins a tie, and an empty `space` raises `ValueError`

## What it does not do

There is no graphical window: the game is played as plain text on standard
input and output. No word list comes with the package; you supply your own.