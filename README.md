# repofetch

A command-line tool that prints a summary of a Git repository: the committer
name and git version as a title, then the project name with its branch and tag
counts, HEAD, pending changes, latest version tag, creation date, top authors,
last change, number of contributors, remote URL, commit count and size of the
tracked files. A row of colour swatches follows.

## Installation

```
pip install .
```

Git must be installed and on your `PATH`. The tool runs `git` to read the
repository.

## Usage

Run it inside a repository:

```
repofetch
```

Or give it a path inside a repository:

```
repofetch /path/to/repo
```

Options:

- `-n, --number-of-authors NUM`: how many authors to show (default 3)
- `--no-merges`: leave merge commits out of the counts
- `--no-bots [REGEX]`: leave out commits whose author name matches REGEX.
  With no REGEX the pattern `(b|B)ot` is used.
- `-E, --email`: show each author's e-mail address
- `-z, --iso-time`: print dates as ISO 8601 timestamps in UTC instead of
  relative times such as "2 years ago"
- `-d, --disabled-fields FIELD...`: hide fields, for example `version repo`.
  Field names: `title`, `project`, `head`, `pending`, `version`, `created`,
  `languages`, `authors`, `last-change`, `contributors`, `repo`, `commits`,
  `lines-of-code`, `size`.
- `--ascii-input STRING`: draw STRING as a logo to the left of the
  information. `{0}` to `{9}` inside it switch to the matching logo colour.
- `-c, --ascii-colors X...`: colours for the logo, numbers 0–15
- `-t, --text-colors X...`: colours for title, tilde, underline, subtitle,
  colon and info, numbers 0–15, up to six values
- `--show-logo auto|never|always`: with `never` only the text is printed;
  with `auto` the logo is left out on terminals narrower than 95 columns
- `--no-bold`, `--no-color-palette`: plainer output
- `-o, --output json|yaml`: print the information as JSON or YAML instead
- `--generate bash|zsh|fish|powershell|elvish`: print a shell completion
  script
- `-V, --version`: print the version

Examples:

```
repofetch --no-merges -n 5 --iso-time
repofetch --output json
repofetch -d version repo --show-logo never
repofetch --ascii-input "$(cat logo.txt)" -c 1 4
```

Invalid options, colour numbers outside 0–15, or `--image-protocol` and
`--color-resolution` without `--image`, end the program with exit status 2.
Failures while reading the repository end it with exit status 1.

## What it does not do

- It does not count lines of code or work out which languages a repository
  uses, so the languages and lines-of-code fields stay empty, and
  `--languages`, `--exclude`, `--type` and `--include-hidden` have no effect.
  `--languages` and `--package-managers` print nothing.
- It has no built-in logos. Without `--ascii-input` only the text is printed;
  `--ascii-language` is accepted but not used.
- It does not show images. `--image` is accepted, but printing with a logo
  then fails with "Could not detect a supported image backend".
- It does not detect licences or list dependencies.
- `--true-color` only changes how language colours would be chosen; with no
  language statistics it has no visible effect.

## Library use

The fields can be built and formatted from Python:

```python
from repofetch.fields import ProjectInfo, bytes_to_human_readable

print(ProjectInfo(repo_name="demo", number_of_branches=3, number_of_tags=2).value())
# demo (3 branches, 2 tags)
print(bytes_to_human_readable(2048))
# 2.00 KiB
```

`repofetch.repository.Repository.discover(path)` finds a repository and
`repofetch.repository.Commits.collect(...)` gathers author and commit
statistics; `repofetch.info.Info.collect(config)` gathers everything, with a
`Config` from `repofetch.config.parse_config(argv)`.

## Tests

```
pip install ".[test]"
pytest
```