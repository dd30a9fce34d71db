#########
# DOTRenderer: writes an RDF graph as a Graphviz digraph.
#
# layout of the output:
#
# digraph G{
#   charset="utf-8";
#
#   // Edges
#   one line per triple
#
#   // Nodes
#   one line per distinct subject or object
# }
#
# The graph is passed to each call and not kept, so calls are independent.

import io
import logging

from rdfdot.colors import DEFAULT_COLORS
from rdfdot.formatter import DotFormatter
from rdfdot.labels import PrefixTable
from rdfdot.sources import as_source


# subjects first, then objects, each node once, in order of first appearance
def distinct_nodes(source):
    seen = set()
    nodes = [ ]
    for node_list in (source.subjects(), source.objects()):
        for node in node_list:
            if node not in seen:
                seen.add(node)
                nodes.append(node)
    return nodes


def _as_prefix_table(prefixes):
    if prefixes is None:
        return PrefixTable()
    if isinstance(prefixes, dict):
        return PrefixTable(prefixes)
    return prefixes


class DOTRenderer:
    def __init__(self, formatter = None, indent = "  "):
        if formatter is None:
            formatter = DotFormatter()
        self.formatter = formatter
        self.indent = indent

    ###
    # write the DOT text for graph to the text stream out.
    # graph: an rdflib Graph, a triple source, or an iterable of triples
    # prefixes: PrefixTable, dict namespace -> prefix, or None
    # colors: NodeColors, defaults to DEFAULT_COLORS
    def write(self, graph, out, prefixes = None, colors = None):
        source = as_source(graph)
        prefixes = _as_prefix_table(prefixes)
        if colors is None:
            colors = DEFAULT_COLORS

        self._line(out, self.formatter.header(), level = 0)
        self._line(out, self.formatter.preamble())
        self._line(out, "")

        # edges: one for each triple
        self._line(out, self.formatter.edge_comment())
        num_edges = 0
        for triple in source.triples():
            self._line(out, self.formatter.format_edge(triple, prefixes, colors))
            num_edges += 1
        self._line(out, "")

        # nodes: one for each distinct subject and object
        self._line(out, self.formatter.node_comment())
        num_nodes = 0
        for node in distinct_nodes(source):
            declaration = self.formatter.format_node_declaration(node, prefixes, colors)
            if declaration is not None:
                self._line(out, declaration)
                num_nodes += 1

        self._line(out, self.formatter.footer(), level = 0)

        logging.debug('Wrote {} edges and {} node declarations'.format(num_edges, num_nodes))

    # the DOT text as a string
    def render(self, graph, prefixes = None, colors = None):
        out = io.StringIO()
        self.write(graph, out, prefixes = prefixes, colors = colors)
        return out.getvalue()

    # empty lines are not indented
    def _line(self, out, text, level = 1):
        if text:
            out.write(self.indent * level + text + "\n")
        else:
            out.write("\n")


def render(graph, prefixes = None, colors = None):
    return DOTRenderer().render(graph, prefixes = prefixes, colors = colors)
