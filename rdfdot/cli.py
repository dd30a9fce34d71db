# read an RDF file and write it as a Graphviz DOT graph
#
# usage:
# rdfdot <graph.ttl> [-o graph.dot] [-p ex=http://ex.org/] [-c colors.json] [-r png]

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError

import graphviz
import rdflib
from rdflib.util import guess_format

from rdfdot.colors import DEFAULT_COLORS, load_colors
from rdfdot.labels import PrefixTable
from rdfdot.renderer import DOTRenderer


# PREFIX=NAMESPACE on the command line
def prefix_binding(value):
    prefix, sep, namespace = value.partition("=")
    if sep == "" or prefix == "" or namespace == "":
        raise ArgumentTypeError("expected PREFIX=NAMESPACE, got {!r}".format(value))
    return prefix, namespace


def make_parser():
    parser = ArgumentParser(description = 'Write an RDF graph in Graphviz DOT format')
    parser.add_argument('input', help = 'path to the RDF file')
    parser.add_argument('--output', '-o', help = 'path to the output .dot file (default: stdout)')
    parser.add_argument('--format', '-f',
                        help = 'rdflib parser format of the input (default: guessed from the file name, else turtle)')
    parser.add_argument('--prefix', '-p', action = 'append', type = prefix_binding, default = [ ],
                        metavar = 'PREFIX=NAMESPACE', help = 'abbreviate NAMESPACE as PREFIX in labels')
    parser.add_argument('--no-graph-prefixes', action = 'store_true',
                        help = 'do not use the prefixes declared in the input file')
    parser.add_argument('--colors', '-c', help = 'json file with color overrides')
    parser.add_argument('--render', '-r', metavar = 'FORMAT',
                        help = 'also lay out the graph with Graphviz, e.g. png or svg (needs --output)')
    parser.add_argument('--verbose', '-v', action = 'store_true', help = 'log progress')
    return parser


def main(argv = None):
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.render is not None and args.output is None:
        parser.error('--render needs --output')

    logging.basicConfig(level = logging.INFO if args.verbose else logging.WARNING,
                        format = '%(asctime)s - %(message)s')

    rdf_format = args.format or guess_format(args.input) or "turtle"
    logging.info('Reading graph from {} as {}...'.format(args.input, rdf_format))
    g = rdflib.Graph()
    g.parse(args.input, format = rdf_format)
    logging.info('Done, {} triples.'.format(len(g)))

    if args.no_graph_prefixes:
        prefixes = PrefixTable()
    else:
        prefixes = PrefixTable.from_graph(g)
    for prefix, namespace in args.prefix:
        prefixes.bind(prefix, namespace)

    if args.colors is not None:
        logging.info('Reading colors from {}'.format(args.colors))
        colors = load_colors(args.colors)
    else:
        colors = DEFAULT_COLORS

    renderer = DOTRenderer()
    if args.output is None:
        renderer.write(g, sys.stdout, prefixes = prefixes, colors = colors)
        return 0

    logging.info('Writing DOT graph to {}'.format(args.output))
    with open(args.output, 'w', encoding = 'utf-8') as fout:
        renderer.write(g, fout, prefixes = prefixes, colors = colors)

    if args.render is not None:
        logging.info('Laying out {} as {}...'.format(args.output, args.render))
        with open(args.output, 'r', encoding = 'utf-8') as fin:
            source = graphviz.Source(fin.read(), filename = args.output)
        rendered = source.render(format = args.render)
        logging.info('Done, wrote {}.'.format(rendered))

    return 0


if __name__ == '__main__':
    sys.exit(main())
