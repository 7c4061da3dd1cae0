# mipconv

Helpers for converting climate model output to MIP-style (CMIP)
datasets. The package uses only the standard library.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

- `mipconv.textutils`: text helpers.
  - `get_ints(text, maxnum, delim, defaults)` reads integers separated
    by `delim`. It returns the number of fields and the list of values.
    Empty fields keep their default. A bad field raises `ValueError`.
  - `split(text, maxlen, maxnum)` splits on whitespace and returns the
    fields and the rest of the text. A field longer than `maxlen - 1`
    characters raises `SplitOverflowError`.
  - `split2(text, delims, keylen)` splits a key from the rest of the
    text.
  - `startswith`, `startswith_nocase` and `strcasecmp` compare
    strings. `startswith_nocase` and `strcasecmp` ignore ASCII case.
  - `trimmed_tail` gives the index just past the last character that
    is not whitespace.
  - `read_logicline(stream, size)` reads a line. A trailing backslash
    continues it on the next line. It returns `None` at the end of the
    stream.
  - `fskim(stream, endchar, bufsize)` reads up to and including a stop
    character.
- `mipconv.msglog`: `MessageLogger` writes messages to a stream or to a
  file.
  - Each message has a prefix with a timestamp, a name and a label
    from `Level` (`INFO`, `NOTICE`, `WARN`, `ERR`, `SYSERR`).
  - `set_level` takes `"verbose"`, `"normal"`, `"quiet"` or `"silent"`.
  - `set_prefix_func` replaces the prefix writer.
- `mipconv.seq`: `Sequence(spec, first, last)` expands a specifier such
  as `"1:10"`, `"2:10:2"`, `"4:1:-1"`, `"10:"` or `"1:3, 7:10"`.
  - An empty head of a range stands for `first`. An empty tail stands
    for `last`.
  - `advance`, `next_token`, `count`, `check` and iteration step
    through the values.
- `mipconv.sdb`: `SimpleDatabase(path)` reads a text file of `key value`
  lines.
  - Lines that start with `#` and blank lines are skipped. A trailing
    backslash continues a line.
  - `read_item(key)` returns the value, or `None` if the key is absent.
  - It works as a context manager.
- `mipconv.config`: `Settings` holds the settings of a run.
  - `basetime` and `ocean_sigma_bottom` are set with `set_parameter`
    or read from a stream with `read_config`. An unknown key raises
    `KeyError`.
  - `writing_mode` is a `WritingMode` (`preserve`, `append` or
    `replace`).
  - `use_netcdf` takes the requested netCDF format version and the
    version of the linked library. It returns the version used.
    `parse_netcdf_version` reads the major version from a library
    version string.
- `mipconv.unit`: `UnitOverride` replaces a variable's unit when one is
  set.
- `mipconv.version`: `mipconv_version()` returns `"mipconv 2.6.0"`.
- `mipconv.site`: `load_site_locations(path)` reads
  `id, longitude, latitude` lines. A bad line raises `SiteFormatError`.
  - `SiteLocations.update_indexes(lons, lats)` finds the nearest grid
    point of each site. Longitudes are compared modulo 360.
  - `nearest_index` and `nearest_index_modulo` are available directly.
- `mipconv.tripolar`: `TripolarMapping(pole_latitude)` maps the model's
  tripolar grid coordinates to true longitude and latitude.
  - `transpose` and `bipolar` map a single point.
  - `backward_transform` maps a whole grid.
  - `grid` returns the points together with the corner vertices of
    each cell.
  - `Polar` is the complex-number helper used for the mapping.

## Examples

```python
from mipconv.seq import Sequence

seq = Sequence("90::3  4:1:-1", 1, 100)
print(list(seq))        # [90, 93, 96, 99, 4, 3, 2, 1]
print(seq.count())      # 8
```

```python
from mipconv.tripolar import TripolarMapping

mapping = TripolarMapping(63.0)
lon, lat = mapping.transpose(0.0, 63.0)   # about (60.0, 63.0)
```

## What this package does not do

There is no command-line program. The package does not read model
output files. It does not write netCDF files or files in MIP format.
It does not load MIP tables and it does not define axes or grids for
such files. It provides the pieces listed above, which a conversion
tool can build on.