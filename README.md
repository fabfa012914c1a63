# histkit

Pure-Python building blocks for shell history tools. It has no runtime
dependencies.

## What is inside

- `histkit.duration`: `format_duration` turns a non-negative
  `datetime.timedelta` into a short form that keeps only the most significant
  unit, for example `3h`, `2mo` or `15ms`. Anything under a millisecond is
  `0s`. A negative duration raises `ValueError`.
- `histkit.cursor`: `Cursor` is a line-editing buffer with `text` and `index`.
  It moves by character (`left`, `right`, `start`, `end`) and by word
  (`next_word`, `prev_word`), inserts text (`insert`) and deletes it (`remove`,
  `back`, `remove_next_word`, `remove_prev_word`, `clear`). Word movement
  follows one of two `WordJumpMode` styles, `EMACS` or `SUBL`, and is worked
  out by a `WordJumper`.
- `histkit.history`: the `History` record (command, timestamp, duration in
  nanoseconds, exit code, working directory, session, hostname, id), the
  `ListMode` output modes with `ListMode.from_flags`, and the template
  functions `parse_format`, `format_field` and `format_history`. Templates use
  the placeholders `{command}`, `{directory}`, `{duration}`, `{user}`,
  `{host}`, `{time}`, `{exit}` and `{relativetime}`; `{{` and `}}` stand for
  literal braces. A bad template or an unknown placeholder raises
  `FormatError`. `print_list` writes entries one per line, in the reverse of
  the order given, to standard output or to a stream passed as `out`; a closed
  pipe ends the output quietly.
- `histkit.stats`: `interesting_command` reduces a command line to the part
  worth counting: the program, with a leading `sudo` dropped, plus the
  subcommand for `cargo`, `go`, `git`, `npm`, `yarn` and `pnpm`.
  `compute_stats` counts commands into a `Stats` summary (top commands, total,
  unique) and raises `ValueError` when there is nothing to show. `render_stats`
  draws the summary as a coloured bar chart for a terminal.
- `histkit.history_list`: the layout rules behind a scrolling result list.
  `ListState` holds the offset, the selected row and the number of visible
  rows. `items_bounds` gives the visible window, `index_prefix` gives the
  three-character row marker, and `time_padding` gives the column at which a
  relative time starts so that the `ago` suffix lines up.
- `histkit.ranking`: ranking of fuzzy-search matches. `rank_score` combines a
  match score with how often and how recently a command was used, where in the
  command the match begins, and the directory distance measured by
  `path_dist`. Lower scores are better. `RankedResults` keeps the best-scored
  item for each command, sorted, up to a limit of 200 by default.

## Example

```python
from datetime import timedelta

from histkit.cursor import Cursor
from histkit.duration import format_duration
from histkit.history import History, format_history
from histkit.stats import interesting_command

print(format_duration(timedelta(seconds=90)))             # 1m
print(interesting_command("sudo cargo build --release"))  # cargo build

cur = Cursor("git status")
cur.end()
cur.back()
print(cur.substring())                                    # git statu

entry = History(command="ls -la", cwd="/tmp", hostname="box:alice")
print(format_history(entry, "{user}@{host} {directory}$ {command}"))
# alice@box /tmp$ ls -la
```

## What it does not do

histkit is a library only. It has no command-line program, does not store
history or read it from a shell's history file, has no interactive search
screen, no shell integration scripts and no syncing. It does not do fuzzy
matching itself: `rank_score` takes a match score computed elsewhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```