# color scheme for the five visual categories of a DOT rendering:
# URI nodes, blank nodes, literal nodes, normal edges, and edges
# that point to a literal.

import json
from collections import namedtuple


class NodeColors(namedtuple("NodeColors", ["uri", "blank", "literal", "normal_edge", "literal_edge"])):
    """immutable color configuration, one Graphviz color per category"""
    __slots__ = ()

    # a copy of this configuration with some of the colors replaced
    def with_overrides(self, overrides):
        unknown = set(overrides) - set(self._fields)
        if unknown:
            raise ValueError("unknown color categories: {}".format(", ".join(sorted(unknown))))
        return self._replace(**overrides)


DEFAULT_COLORS = NodeColors(
    uri = "blue",
    blank = "gray",
    literal = "darkgreen",
    normal_edge = "black",
    literal_edge = "darkgreen")


# read a json object of color overrides, e.g. {"uri": "red"},
# and apply it on top of the given base scheme
def load_colors(path, base = DEFAULT_COLORS):
    with open(path, 'r', encoding = 'utf-8') as fin:
        overrides = json.load(fin)

    if not isinstance(overrides, dict):
        raise ValueError("color file {} must contain a json object".format(path))

    return base.with_overrides(overrides)
