####
# triple sources: anything the renderer can ask for
#   triples()  -> every (subj, pred, obj) triple
#   subjects() -> the subject of every triple
#   objects()  -> the object of every triple
# subjects and objects may repeat, the renderer deduplicates.

import rdflib


# an rdflib Graph as a triple source
class GraphSource:
    def __init__(self, graph):
        self.graph = graph

    def triples(self):
        return self.graph.triples((None, None, None))

    # same enumeration as the edges, also for quad-yielding graphs like Dataset
    def subjects(self):
        for subj, pred, obj in self.triples():
            yield subj

    def objects(self):
        for subj, pred, obj in self.triples():
            yield obj

    def __len__(self):
        return len(self.graph)


# a plain list of triples, kept in insertion order
class TripleList:
    def __init__(self, triples = None):
        self.triplelist = [ ]
        if triples is not None:
            for triple in triples:
                self.add(triple)

    def add(self, triple):
        subj, pred, obj = triple
        self.triplelist.append((subj, pred, obj))

    def triples(self):
        return iter(self.triplelist)

    def subjects(self):
        return (subj for subj, pred, obj in self.triplelist)

    def objects(self):
        return (obj for subj, pred, obj in self.triplelist)

    def __len__(self):
        return len(self.triplelist)


def _is_source(obj):
    return all(callable(getattr(obj, name, None)) for name in ("triples", "subjects", "objects"))


# turn whatever we were given into a triple source
def as_source(graph):
    # an rdflib Graph has triples/subjects/objects too, but with different signatures
    if isinstance(graph, rdflib.Graph):
        return GraphSource(graph)
    if _is_source(graph):
        return graph
    return TripleList(graph)
