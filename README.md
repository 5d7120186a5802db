# tgv

`tgv` holds the building blocks of a terminal genome browser: genomic
coordinates, a viewing window that pans and zooms over a contig, gene and exon
tracks with "next / previous feature" navigation, read stacking and coverage
for alignments, cytoband ideograms, and vim-style key handling that turns
keystrokes into state messages.

All coordinates are 1-based. Unless noted otherwise, intervals are inclusive
at both ends.

## Contigs and regions

```python
from tgv.contig import Contig
from tgv.region import Region

chrom = Contig.chrom("17")
chrom.full_name()          # "chr17"
chrom.abbreviated_name()   # "17"

region = Region(chrom, 7_572_000, 7_573_000)
region.width()             # 1001
region.covers(7_572_500)   # True
str(region)                # "chr17:7572000-7573000"
```

`Contig.chrom` adds the `chr` prefix to the bare names `1`–`22`, `X`, `Y` and
`MT`. `Contig.contig(name)` makes a plain contig (for example a viral genome)
whose name is kept exactly as given. A `Region` whose start is after its end
raises `tgv.errors.TGVValueError`.

## Reference genomes

```python
from tgv.reference import Reference

hg38 = Reference.parse("hg38")
hg38.length(Contig.chrom("1"))   # 248956422
```

`Reference.HG19` and `Reference.HG38` are supported. `length` returns `None`
for contigs it has no length for; an unknown reference name raises
`tgv.errors.ParsingError`.

## Viewing window

`ViewingWindow` keeps the left-most base, the top alignment row and the
horizontal zoom (bases per screen column). Geometry is taken from an `Area`
giving the screen region's width and height in cells.

```python
from tgv.window import Area, ViewingWindow

window = ViewingWindow.basewise(Contig.chrom("17"), 7_572_000, 0)
area = Area(width=50, height=20)

window.zoom_out(2, area, contig_length=83_257_441)
window.right(area)
window.onscreen_x_coordinate(7_572_010, area)   # an OnScreenCoordinate
```

`onscreen_x_coordinate` and `onscreen_y_coordinate` return an
`OnScreenCoordinate` whose `side` is `Side.LEFT`, `Side.ON_SCREEN` or
`Side.RIGHT`; `OnScreenCoordinate.onscreen_start_and_length` gives the visible
part of a span. A zoom factor of zero raises `tgv.errors.TGVValueError`; given
a contig length, the window corrects itself so that it never runs past the end
of the contig.

## Key handling

`NormalModeRegister` and `CommandModeRegister` translate keys into lists of
`tgv.message.StateMessage` values without changing any state themselves.
Character keys are passed as one-character strings, other keys as members of
`tgv.register.Key`.

Normal mode understands counts and vim-like motions (`h`, `l`, `j`, `k`, `w`,
`b`, `e`, `ge`, `W`, `B`, `E`, `gE`, `y`, `p`, `z`, `o`, `{`, `}`):

```python
from tgv.register import NormalModeRegister

register = NormalModeRegister("5")
register.translate("l")
# [StateMessage(StateKind.MOVE_RIGHT, 5), StateMessage(StateKind.CLEAR_NORMAL_MODE_REGISTERS)]
```

Command mode accepts:

| input        | meaning                               |
|--------------|---------------------------------------|
| `q`          | quit                                  |
| `h`          | help                                  |
| `1234`       | go to position 1234 on this contig    |
| `17:7572659` | go to position 7572659 on contig 17   |
| `TP53`       | go to a gene by name                  |

```python
from tgv.register import CommandModeRegister

register = CommandModeRegister()
for c in "17:7572659":
    register.add_char(c)
register.parse()
# [StateMessage(StateKind.GOTO_CONTIG_COORDINATE, ("17", 7572659))]
```

Invalid input raises `tgv.errors.ParsingError` with a message such as
`"Invalid command mode input: chr1:invalid"`.

`StateMessage.requires_reference()` tells whether handling a message needs a
reference genome (gene and exon motions, going to a gene).

## Gene tracks

```python
from tgv.strand import Strand
from tgv.track import Gene, Track

gene = Gene(
    id="NM_000001", name="GENE1", strand=Strand.FORWARD, contig=Contig.chrom("1"),
    transcription_start=2, transcription_end=10, cds_start=2, cds_end=10,
    exon_starts=[2, 8], exon_ends=[5, 10],
)
track = Track.from_genes([gene], Contig.chrom("1"))
track.get_gene_at(5)                    # gene
track.get_k_exons_after(2, 1)           # Feature starting at 8
track.get_saturating_k_exons_before(51, 5)
```

`get_k_*` methods return `None` when there is no such gene or exon; the
`get_saturating_k_*` variants fall back to the first or last one.
`Gene.features()` splits a transcript into coding exons, non-coding exon parts
and introns as `(start, end, FeatureType, number)` tuples, numbered in the
direction of the strand.

## Remote data

* `tgv.track_service.TrackService.connect(reference, ...)` opens a MySQL
  connection (by default to the public UCSC server) and queries the
  `ncbiRefSeqSelect` table for genes overlapping a region, covering a
  coordinate, by name, or the k-th gene or exon before or after a coordinate.
  A `TrackService` can also be built around any DB-API connection whose
  cursors yield rows as mappings. Database failures raise
  `tgv.errors.TGVIOError`.
* `tgv.sequence_service.SequenceService(reference)` fetches the reference
  sequence of a region over HTTP with `httpx` and returns a
  `tgv.sequence.Sequence`.
* `tgv.data.Data` holds the loaded alignment, track and sequence and reloads
  each only when a `DataMessage` asks for a region not already covered. Local
  BAM files and their `.bai` indexes must exist when it is created. Both
  services and `Data` are context managers that close their connections.

## Alignments and cytobands

`tgv.alignment.Alignment.from_records(records, region)` stacks `ReadRecord`
values (0-based `pos`, exclusive `reference_end`, soft-clip counts) into rows
with a gap of at least three bases between neighbours and keeps per-base
coverage; `coverage_at` and `mean_basewise_coverage_in` read it back. Stored
coverage values are `2 * (reads + 1)` at every position touched by a read.
`query_contig_name(reference_names, region)` picks whether a file header uses
full or abbreviated contig names.

`tgv.cytoband.Cytoband.from_csv(stream, reference)` reads a cytoband table
with a header row (`chrom,start,end,name,stain`, 0-based starts) into one
`Cytoband` per main chromosome; `Cytoband.from_non_reference(contigs, lengths)`
builds single-band ideograms for genomes without a cytoband table.

## Errors

Every error derives from `tgv.errors.TGVError`: `CliError`, `TGVIOError`,
`StateError`, `ParsingError` and `TGVValueError`. Errors compare equal when
they are of the same class and carry the same message.

## What the package does not do

* There is no command-line program and no terminal screen: nothing draws the
  window, tracks or alignments, and nothing reads keys from a terminal.
* BAM files are not read. `Data` checks that local BAM and index files exist,
  but loading alignments needs an `alignment_reader` callable that turns a BAM
  path, an index path and a region into an `Alignment` (for example via
  `Alignment.from_records`).
* No cytoband tables are shipped; pass your own to `Cytoband.from_csv`.

## Running the tests

Install the `test` extra and run `pytest` from the project root.