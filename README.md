# promptpath

Helpers for showing a directory in a shell prompt. The `promptpath.directory`
module can contract a path against a leading directory and abbreviate, fish
style, the directory names in front of a truncated path.

## Installation

```
pip install promptpath
```

## Usage

### Contracting a path

`contract_path(full_path, top_level_path, top_level_replacement)` puts a short
label in place of a leading directory, such as the home directory or a
repository root. Both paths may be strings or path-like objects. The result
always uses `/` as the separator.

```python
from promptpath.directory import HOME_SYMBOL, contract_path

contract_path("/Users/astronaut/schematics/rocket", "/Users/astronaut", HOME_SYMBOL)
# '~/schematics/rocket'

contract_path("/Users/astronaut/dev/rocket-controls/src",
              "/Users/astronaut/dev/rocket-controls",
              "rocket-controls")
# 'rocket-controls/src'
```

- If the path is not inside the given directory, it comes back whole, written
  with `/` separators.
- If the path is the directory itself, you get the label alone.

Paths are compared by their components, using Windows path rules on Windows
and POSIX rules elsewhere. `HOME_SYMBOL` is the label `"~"`.

### Windows drive prefixes

`replace_c_dir(path)` replaces every `C:/` in the string with `/c` when running
on Windows. On every other platform it returns the string unchanged.
`contract_path` applies it to the text it returns.

### Fish-style abbreviation

`to_fish_style(pwd_dir_length, dir_string, truncated_dir_string)` strips
`truncated_dir_string` from the end of `dir_string` (as many times as it
repeats there) and cuts every remaining directory name down to its first
`pwd_dir_length` characters. Characters are counted as user-perceived
characters (grapheme clusters). A name that starts with a dot keeps one more
character than the given length, so the dot does not use up the allowance.
Names already short enough are left alone.

```python
from promptpath.directory import to_fish_style

to_fish_style(1, "~/starship/engines/booster/rocket", "engines/booster/rocket")
# '~/s/'

to_fish_style(2, "/absolute/Path/not/in_a/repo/but_nested", "repo/but_nested")
# '/ab/Pa/no/in/'

to_fish_style(1, "~/.starship/engines/booster/rocket", "engines/booster/rocket")
# '~/.s/'
```

Put the result in front of the truncated path to build the full segment.

## What it does not do

This is a library of string helpers only. It does not find the current
directory or the home directory, detect repositories, read configuration,
truncate a path to a number of components, or colour and print a prompt. There
is no command-line program; call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```