from rdfdot.colors import DEFAULT_COLORS, NodeColors, load_colors
from rdfdot.formatter import BLANK, LITERAL, URI, DotFormatter
from rdfdot.labels import (PrefixTable, abbreviate, escape_lexical, literal_datatype,
                           literal_suffix, local_name, namespace_of, pretty_literal)
from rdfdot.renderer import DOTRenderer, distinct_nodes, render
from rdfdot.sources import GraphSource, TripleList, as_source
