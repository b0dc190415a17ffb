"""
Dataset
===
This folder contains all processes needed to prepare temporal edge graph (TEG) datasets for temporal-graph query benchmarking.
The architecture of this directory looks as follows:
[`adapters`: raw datasets -> canonical TEG triples `source,target,timestamp` with dense zero-based ids]
    adapter.py: Shared adapter interface; names and snapshot keys are normalized and written here.
    dblp.py: DBLP XML release; co-authors of a publication are pairwise linked in its year.
    imdb.py: IMDB movie CSV; actors of a film are pairwise linked in its year.
    wiki.py: KONECT-style hyperlink stream; every line is a directed link at its date.
    run.py: `python -m tegprep.dataset.adapters.run {dblp,imdb,wiki} <input> [--simplify]`
[`TEG`: canonical TEG triples -> `source,target,startTime,endTime` with synthesized deletions]
    loader.py -> validator.py -> condensed_graph.py -> deletion.py -> writer.py
    preprocessor.py: Runs the stages above one after another.
    run.py: `python -m tegprep.dataset.TEG.run <input> [--seed SEED]`
"""
