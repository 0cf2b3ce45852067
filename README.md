# slidedeck

`slidedeck` holds the building blocks used to turn a markdown document into a
terminal presentation. It parses the commands written inside HTML comments and
reads the front matter at the top of a document. It also holds the options
that control building, numbers list items and builds their prefixes, lays out
tables as aligned text, and parses image attributes.

## Installation

```
pip install slidedeck
```

To install the test dependencies as well:

```
pip install "slidedeck[test]"
```

## Modules

- `slidedeck.commands`: `parse_comment_command` parses a command such as
  `pause`, `end_slide`, `new_lines: 2`, `column_layout: [1, 2]`, `column: 1`,
  `font_size: 2` or `alignment: center` into a `CommentCommand`. That object
  carries a `CommandKind` and the command's value, if the command takes one.
  `newline` and `newlines` are accepted as aliases. Bad commands raise
  `CommandParseError`. `parse_comment` first strips a command prefix. It
  returns `None` for comments that are ordinary user comments: those that span
  several lines, lack the prefix, start with `vim:`, or are `{{{` or `}}}`.
  `should_ignore_comment` makes that decision on its own.
- `slidedeck.metadata`: `parse_front_matter` reads front matter YAML into a
  `PresentationMetadata`, with its title, sub-title, event, location, date,
  author or authors, `ThemeMetadata` and options. In strict mode an unknown
  field is an error. It also rejects `author` together with `authors`, a theme
  name together with a theme path, and `extends` in theme overrides. All of
  these raise `MetadataError`. Dates and words such as `yes` are kept as text.
- `slidedeck.options`: `BuilderOptions` holds the settings for building a
  presentation, with their defaults. `OptionsConfig.from_mapping` reads the
  `options` section of front matter. `BuilderOptions.merge` applies every
  option that is set.
- `slidedeck.lists`: `ListItem` and `ListItemKind` describe list items.
  `iterate_list` numbers items among their siblings. It restarts at each
  deeper level and resumes on the way back out. `list_item_prefix` builds the
  indentation and marker (`•`, `◦`, `▪`, `1.` or `1)`) for a font size.
  `list_block_length` gives the width of the widest item. `text_width` counts
  terminal columns.
- `slidedeck.tables`: `format_table` lays out a header and rows as lines of
  text, with `│` between cells and a `─`/`┼` rule under the header. The pieces
  are also available on their own: `column_widths`, `format_table_row` and
  `table_separator`.
- `slidedeck.images`: `parse_image_attributes` reads comma separated
  attributes such as `image:width:50%` or `image:w:50%` into
  `ImageAttributes`. `ImageAttributes.width_ratio` gives the width as a
  ratio. `parse_percent` parses a percentage. Bad attributes raise
  `ImageAttributeError`.

## Examples

```python
from slidedeck.commands import CommandKind, parse_comment, parse_comment_command

command = parse_comment_command("column_layout: [1, 2]")
assert command.kind is CommandKind.INIT_COLUMN_LAYOUT
assert command.value == (1, 2)

assert parse_comment("cmd:end_slide", "cmd:").kind is CommandKind.END_SLIDE
assert parse_comment("just a note", "cmd:") is None
```

```python
from slidedeck.tables import format_table

lines = format_table(["key", "value", "other"], [["potato", "bar", "yes"]])
# ['key    │ value │ other',
#  '───────┼───────┼──────',
#  'potato │ bar   │ yes  ']
```

```python
from slidedeck.lists import ListItem, ListItemKind, iterate_list, list_item_prefix

items = [ListItem(0, "one"), ListItem(1, "one.one"), ListItem(0, "two")]
assert [entry.index for entry in iterate_list(items)] == [0, 0, 1]
assert list_item_prefix(ListItem(0, "one", ListItemKind.ORDERED_PERIOD, 1)) == "   1. "
```

```python
from slidedeck.images import parse_image_attributes
from slidedeck.metadata import parse_front_matter
from slidedeck.options import BuilderOptions

assert parse_image_attributes("image:width:50%").width == 50

metadata = parse_front_matter("title: Hello\noptions:\n  incremental_lists: true")
options = BuilderOptions()
options.merge(metadata.options)
assert options.incremental_lists is True
```

## What it does not do

This package does not hold slides and does not render anything. It has no
model of slides and chunks and no navigation between them. It does not check
column layouts, does not compare presentations, and has no terminal drawing
and no command to run. It parses and formats the pieces that such a program is
built from.

## Running the tests

```
pytest
```