#########
# DotFormatter: turns nodes and triples into lines of Graphviz DOT.
#
# The renderer only decides what to write and in which order;
# every line comes from a formatter. A different dialect is a different
# formatter object with the same methods, handed to DOTRenderer.
#
# edge line:
#   "<subject>" -> "<object>" [label="<predicate>",color="<color>"]
# node lines:
#   "<uri>" [label="<prefixed name>",shape=ellipse,color="<color>"]
#   "<bnode id>" [label="",shape=circle,color="<color>"]
#   "<lexical@lang>" [label="<lexical>",shape=record,color="<color>",lang="<tag>",datatype="<uri>"]

import logging

from rdflib.term import BNode, Literal, URIRef

from rdfdot.labels import abbreviate, escape_lexical, literal_suffix, pretty_literal


# node kinds
URI = "uri"
BLANK = "blank"
LITERAL = "literal"


class DotFormatter:

    def classify_node(self, node):
        if isinstance(node, URIRef):
            return URI
        elif isinstance(node, BNode):
            return BLANK
        elif isinstance(node, Literal):
            return LITERAL
        raise TypeError("unrecognized node kind {}: {!r}".format(type(node).__name__, node))

    # the quoted identifier of a node in the DOT text
    def node_id(self, node):
        if self.classify_node(node) == LITERAL:
            return pretty_literal(node)
        return str(node)

    ###
    # fixed lines
    def header(self):
        return "digraph G{"

    def preamble(self):
        return 'charset="utf-8";'

    def edge_comment(self):
        return "// Edges"

    def node_comment(self):
        return "// Nodes"

    def footer(self):
        return "}"

    ###
    # one line for each triple
    def format_edge(self, triple, prefixes, colors):
        subj, pred, obj = triple
        if self.classify_node(obj) == LITERAL:
            color = colors.literal_edge
        else:
            color = colors.normal_edge

        return '"{}" -> "{}" [label="{}",color="{}"]'.format(
            self.node_id(subj), self.node_id(obj), abbreviate(pred, prefixes), color)

    ###
    # one line for each node, or None if the node is not declared
    def format_node_declaration(self, node, prefixes, colors):
        kind = self.classify_node(node)

        if kind == URI:
            return '"{}" [label="{}",shape=ellipse,color="{}"]'.format(
                node, abbreviate(node, prefixes), colors.uri)

        if kind == BLANK:
            return '"{}" [label="",shape=circle,color="{}"]'.format(node, colors.blank)

        # literals with an empty lexical form get no declaration,
        # even though an edge points to them
        if str(node) == "":
            logging.debug('Not declaring empty literal {!r}'.format(node))
            return None

        return '"{}" [label="{}",shape=record,color="{}",{}]'.format(
            pretty_literal(node), escape_lexical(node), colors.literal, literal_suffix(node))
