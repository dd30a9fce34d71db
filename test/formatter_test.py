"""Tests for the DOT line formatter."""

import pytest
from rdflib.namespace import RDF, XSD
from rdflib.term import BNode, Literal, URIRef

from rdfdot.colors import DEFAULT_COLORS
from rdfdot.formatter import BLANK, LITERAL, URI, DotFormatter
from rdfdot.labels import PrefixTable


EX = "http://ex.org/"


@pytest.fixture
def formatter():
    return DotFormatter()


@pytest.fixture
def prefixes():
    return PrefixTable({EX: "ex"})


class TestClassifyNode:

    def test_kinds(self, formatter):
        assert formatter.classify_node(URIRef(EX + "a")) == URI
        assert formatter.classify_node(BNode("b0")) == BLANK
        assert formatter.classify_node(Literal("x")) == LITERAL

    def test_unrecognized_kind_raises(self, formatter):
        with pytest.raises(TypeError):
            formatter.classify_node("http://ex.org/plain-string")


class TestFormatEdge:

    def test_uri_object(self, formatter, prefixes):
        triple = (URIRef(EX + "Alice"), URIRef(EX + "knows"), URIRef(EX + "Bob"))
        line = formatter.format_edge(triple, prefixes, DEFAULT_COLORS)
        assert line == (
            '"http://ex.org/Alice" -> "http://ex.org/Bob" '
            '[label="ex:knows",color="{}"]'.format(DEFAULT_COLORS.normal_edge))

    def test_literal_object(self, formatter, prefixes):
        triple = (URIRef(EX + "France"), URIRef(EX + "capital"), Literal('"Paris"', lang="en"))
        line = formatter.format_edge(triple, prefixes, DEFAULT_COLORS)
        assert line == (
            '"http://ex.org/France" -> "\'Paris\'@en" '
            '[label="ex:capital",color="{}"]'.format(DEFAULT_COLORS.literal_edge))

    def test_blank_subject_and_unknown_predicate(self, formatter, prefixes):
        triple = (BNode("b1"), URIRef("http://other.org/p"), URIRef(EX + "Bob"))
        line = formatter.format_edge(triple, prefixes, DEFAULT_COLORS)
        assert line.startswith('"b1" -> "http://ex.org/Bob" [label="http://other.org/p",')

    def test_unrecognized_object_raises(self, formatter, prefixes):
        triple = (URIRef(EX + "Alice"), URIRef(EX + "knows"), 42)
        with pytest.raises(TypeError):
            formatter.format_edge(triple, prefixes, DEFAULT_COLORS)


class TestFormatNodeDeclaration:

    def test_uri(self, formatter, prefixes):
        line = formatter.format_node_declaration(URIRef(EX + "Alice"), prefixes, DEFAULT_COLORS)
        assert line == '"http://ex.org/Alice" [label="ex:Alice",shape=ellipse,color="{}"]'.format(
            DEFAULT_COLORS.uri)

    def test_blank(self, formatter, prefixes):
        line = formatter.format_node_declaration(BNode("b0"), prefixes, DEFAULT_COLORS)
        assert line == '"b0" [label="",shape=circle,color="{}"]'.format(DEFAULT_COLORS.blank)

    def test_literal_with_language(self, formatter, prefixes):
        line = formatter.format_node_declaration(Literal("Paris", lang="en"), prefixes, DEFAULT_COLORS)
        assert line == (
            '"Paris@en" [label="Paris",shape=record,color="{}",lang="en",datatype="{}"]'.format(
                DEFAULT_COLORS.literal, RDF.langString))

    def test_typed_literal(self, formatter, prefixes):
        line = formatter.format_node_declaration(
            Literal("42", datatype=XSD.integer), prefixes, DEFAULT_COLORS)
        assert line == '"42" [label="42",shape=record,color="{}",datatype="{}"]'.format(
            DEFAULT_COLORS.literal, XSD.integer)
        assert "lang=" not in line

    def test_literal_quotes_escaped(self, formatter, prefixes):
        line = formatter.format_node_declaration(Literal('a "b"'), prefixes, DEFAULT_COLORS)
        assert line.startswith('"a \'b\'" [label="a \'b\'",shape=record,')

    def test_empty_literal_not_declared(self, formatter, prefixes):
        assert formatter.format_node_declaration(Literal(""), prefixes, DEFAULT_COLORS) is None
        assert formatter.format_node_declaration(Literal("", lang="en"), prefixes, DEFAULT_COLORS) is None
