#########
# label formatting for DOT output:
# prefixed names for URIs, escaped lexical forms for literals,
# and the lang/datatype attribute fragment of literal nodes.
#
# all functions here are pure. The literal functions must only
# be called on rdflib Literal nodes.

from rdflib.namespace import RDF, XSD, split_uri


####
# PrefixTable: namespace -> short prefix, used for display only
class PrefixTable:
    # namespaces: a dict namespace -> prefix, or (prefix, namespace) pairs
    def __init__(self, namespaces = None):
        self.prefix = { }
        if namespaces is None:
            return
        if isinstance(namespaces, dict):
            namespaces = [(prefix, namespace) for namespace, prefix in namespaces.items()]
        for prefix, namespace in namespaces:
            self.bind(prefix, namespace)

    # build a table from the namespaces bound on an rdflib graph
    @classmethod
    def from_graph(cls, graph):
        table = cls()
        for prefix, namespace in graph.namespaces():
            # the empty prefix would produce labels like ":Alice"
            if prefix:
                table.bind(prefix, namespace)
        return table

    def bind(self, prefix, namespace):
        self.prefix[str(namespace)] = prefix

    # prefix for the given namespace, or None
    def abbrev(self, namespace):
        return self.prefix.get(str(namespace))

    def __len__(self):
        return len(self.prefix)

    def __contains__(self, namespace):
        return str(namespace) in self.prefix


def _split_position(uri):
    return max(uri.rfind("/"), uri.rfind("#"))

# the part of the URI after the last / or #
def local_name(uri):
    uri = str(uri)
    return uri[_split_position(uri) + 1:]

# XML namespace of the URI, as rdflib splits it;
# the whole URI if it has no NCName local part
def namespace_of(uri):
    uri = str(uri)
    try:
        namespace, _ = split_uri(uri)
    except ValueError:
        return uri
    return namespace


def abbreviate(node, prefixes):
    """prefix:localname if the namespace of the node is known, else the full URI"""
    prefix = prefixes.abbrev(namespace_of(node))
    if prefix is None:
        return str(node)
    return "{}:{}".format(prefix, local_name(node))


# lossy, display-only: double quotes become apostrophes
def escape_lexical(text):
    return str(text).replace('"', "'")


# lexical form plus @lang, used as the node id of a literal
def pretty_literal(node):
    if node.language:
        return "{}@{}".format(escape_lexical(node), node.language)
    return escape_lexical(node)


# explicit datatype, or the implicit RDF 1.1 one
def literal_datatype(node):
    if node.datatype is not None:
        return str(node.datatype)
    if node.language:
        return str(RDF.langString)
    return str(XSD.string)


def literal_suffix(node):
    suffix = ""
    if node.language:
        suffix += 'lang="{}",'.format(node.language)
    return suffix + 'datatype="{}"'.format(literal_datatype(node))
