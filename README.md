# aura-exporter

A command-line tool that keeps a local copy of the photos shared to your
Aura digital picture frames. It logs in to the Aura service with your
account, lists your frames and their assets, and downloads any asset that
is not already present in your backup directory.

## Installation

```
pip install .
```

This installs the `aura` command. For the test suite:

```
pip install ".[test]"
pytest
```

## Logging in and out

Set your account credentials in the environment and run `login`:

```
export AURA_EMAIL=someone@example.com
export AURA_PASSWORD=password
aura login
```

If either variable is missing the command stops with a message naming it.
On success the service's response is written, pretty-printed, to
`aura-auth.json` in the current directory. Every other command that talks
to the service reads that file (and fails with "Not logged in" if it is
absent), so run them from the same directory. The file holds a live
session token; remove it when you are finished:

```
aura logout
```

## Listing frames and assets

```
aura frame list
```

prints the id and name of each frame, one per line, separated by a tab.

```
aura frame asset list --frame-id <FRAME_ID>
```

prints, for the given frame, one line per contributing user: the user id,
the user's name right-aligned, a tab and the number of assets that user
added, sorted from fewest to most. Users not found among the frames'
contributors are shown as `Unknown User`.

Frame and asset listings are cached in the current directory as
`aura-frames.json` and `aura-frame-assets-<FRAME_ID>.json`. While those
files exist they are read instead of asking the service again; delete them
to fetch fresh data.

## Downloading

Download a single asset:

```
aura asset download --user-id <USER_ID> --file-name <FILE_NAME> --save-dir ./backup
```

Pick a frame and then any number of its assets interactively:

```
aura frame asset download-picker --save-dir ./backup
```

The picker prints a numbered list and reads your answer from standard
input. For the frame, enter its number or its name. For assets, enter one
or more numbers, ranges such as `2-4`, file names, or `all`, separated by
commas or spaces. Invalid answers are reported and asked again.

## Full backup

```
aura backup sync --save-dir ./backup --delay-ms 2000 --jiggle-ms 1000 --jiggle-strategy normal
```

`sync` scans the backup directory, loads every frame and its asset list,
and downloads each asset that is missing locally, pausing between
downloads.

- `--save-dir` is the root of the backup (required).
- `--delay-ms` is the base pause between downloads (required).
- `--jiggle-ms` adds a random extra pause of up to this many milliseconds
  (default `0`). Half of it is also added to the base pause.
- `--jiggle-strategy` is `uniform` or `normal` (default `normal`). With
  `normal` the extra pause centres on half of `--jiggle-ms` and is clamped
  to the range `0` to `--jiggle-ms`.

While running, each step is logged along with the steps still queued; the
download step reports how many downloads remain and an estimated time.
A failed download is logged and skipped, and the run carries on with the
remaining files. Running `sync` again later only fetches what is still
missing.

## Backup layout

Assets are stored by the user who uploaded them:

```
<save-dir>/
  users/
    <USER_ID>/
      <FILE_NAME>
```

Each file is fetched from `https://imgproxy.pushd.com/<USER_ID>/<FILE_NAME>`.

## Options and errors

`--debug` can be given with any command to turn on debug logging; in that
mode errors are raised with a full traceback. Otherwise an error is printed
as `Error: ...` on standard error and the command exits with status 1.
`--version` prints the version.

## What it does not do

- Cached frame and asset listings are never refreshed on their own; remove
  the cache files to see new uploads.
- `sync` only adds files. Files in the backup that are no longer on the
  service are left alone, and files already present are not checked or
  re-downloaded.
- Only the file named by each asset's `file_name` is downloaded; other
  renditions, videos and metadata are not saved.