# jardin

Keep the records of a vegetable garden in a SQLite database: which crops
grow on which plot, what was observed and done on them, who supplies your
seeds and tools, and which resources and means each task uses. The package
also runs SQL scripts against the database and dumps the whole database as
a plain SQL script, so a garden can be moved or backed up as text.

## Installation

```
pip install .
```

The package uses only the standard library.

## Opening a garden database

```python
from jardin.database import GardenDatabase

with GardenDatabase("garden.sqli") as db:
    report = db.import_file("restore.sql")   # run a SQL script
    print(report.executed, report.succeeded, report.errors)
    db.add_task_type("Watering")
    for task_type_id, designation in db.task_types():
        print(task_type_id, designation)
    db.export_to_file("backup.sql")          # dump schema and rows as SQL
```

`GardenDatabase` also offers `import_script(script)`, `export_script()`,
`rename_task_type(task_type_id, designation)` and
`delete_task_type(task_type_id)`; the last two return whether a row
changed. Its `connection` attribute is the open `sqlite3` connection, which
the other modules take as their argument.

`write_database_reference(path, database_file)` writes a small XML file
naming the database file, and `read_database_reference(path)` reads that
name back, raising `ValueError` when the file is malformed or names no
database.

## Running SQL scripts directly

`jardin.sqlscript` works on any `sqlite3` connection:

- `strip_comments(script)` replaces `/* ... */` comments, lines starting
  with `--`, tabs and newlines with spaces, and trims the result;
- `split_statements(script)` cleans a script and cuts it at `;` into its
  non-empty statements;
- `run_script(connection, script)` runs them, honouring `BEGIN TRANSACTION`
  and `COMMIT` in the script and wrapping it in a transaction when it does
  not open with one. A failing statement rolls back the open transaction
  and is recorded; the rest still run. It returns a `ScriptReport` with the
  number of statements `executed`, the `errors` as (statement, message)
  pairs, and `succeeded`;
- `export_sql(connection)` writes the schema and every row back out as a
  script between `BEGIN TRANSACTION;` and `COMMIT;`;
- `quote_text(text)` doubles apostrophes for use in SQL literals.

## Crops and observations

```python
import sqlite3
from jardin.crops import CropBook, harvest_date, parse_date

connection = sqlite3.connect("garden.sqli")
book = CropBook(connection)
for crop in book.crops_for_plot(3):
    print(crop.designation, crop.sowing, crop.expected_harvest)

print(harvest_date(parse_date("2024.04.01"), 90))
```

Dates are stored as `yyyy.MM.dd` (`parse_date`, `format_date`). A `Crop`
holds its plot, plant, sowing date, duration, state, comments and harvest
date; `CropBook` can `get`, `add`, `update` and `delete` crops, list
`plant_names()`, find a `plant_id(name)` and give a plant's `PlantInfo`
(moon type, species and family). Unknown ids and names raise `KeyError`.

`ObservationLog` in `jardin.observations` records the tasks done and
observations made on a crop as `Observation` entries (`for_crop`, `add`,
`update`, `delete`, `task_type_names`, `task_type_id`).

`create_phase(connection, crop_id, designation, start)` in `jardin.phases`
adds a one-day phase for a crop to the planner's `tasks` table and returns
its id; it raises `ValueError` when no crop is given and
`PhaseExistsError` when the crop already has a task.

## Contacts

`ContactBook` in `jardin.contacts` keeps `Contact` details of suppliers:
`companies()` lists the company names, `find_by_company(company)` returns a
contact, and `save(contact)` inserts a new one or updates a recorded one.

## Resources and means

`jardin.resources` lists resources (`list_resources`) and attaches them to
tasks (`attach_resource`); `jardin.means` lists means (`list_means`) and
attaches them to resources (`attach_mean`).

## Help index

`jardin.help_index.extract_anchors(html)` collects the named anchors of a
help document, and `build_tree(anchors)` turns names such as `Plots` and
`Plots/Drawing` into a tree of `HelpNode` entries, each with a `target`
link such as `#Plots/Drawing`.

## What the package does not do

- It has no graphical interface and no command to run: it is a library
  of record-keeping functions.
- It does not draw or edit the garden plan, and it does not print crop
  sheets.
- It does not create the database schema or ship a pre-filled database.
  The tables it reads and writes (`cultures`, `plantes`, `observations`,
  `taches`, `tasks`, `coordonnees`, `ressources`, `moyens` and the others)
  must already exist, for example by running a schema script with
  `GardenDatabase.import_file`.

## Running the tests

```
pip install ".[test]"
pytest
```