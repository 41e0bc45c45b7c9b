"""rewrite-report package.

Reconciles the results of an automated refactoring run into generated,
deleted, moved and changed files, surfaces errors the engine embedded in
the transformed trees, and removes directories left empty.

Layout:

- rewrite_report.project      build root and repository root resolution
- rewrite_report.results      markers, snapshots, result pairs, classification
- rewrite_report.recipes      recipe descriptors and change attribution
- rewrite_report.manifest     run manifest loading
- rewrite_report.config       [tool.rewrite_report] / environment configuration
- rewrite_report.apply        writing results to the working tree
- rewrite_report.reporting    console summary and patch file
"""

__version__ = "1.0.0"
