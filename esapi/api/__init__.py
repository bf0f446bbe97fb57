"""Built-in endpoint descriptor table.

Entries follow the layout of the Elasticsearch REST API spec files, keyed by
dotted endpoint name, so that :meth:`esapi.registry.Registry.load` can read
the upstream JSON files with the same code. Parameter types may be written
in shorthand (``'boolean'`` for ``{'type': 'boolean'}``).
"""

from esapi.api import cat, cluster, core, indices, ingest, ml, nodes, snapshot, tasks

__all__ = ['SPECS']

SPECS = {
    **core.ENDPOINTS,
    **cat.ENDPOINTS,
    **cluster.ENDPOINTS,
    **indices.ENDPOINTS,
    **ingest.ENDPOINTS,
    **ml.ENDPOINTS,
    **nodes.ENDPOINTS,
    **snapshot.ENDPOINTS,
    **tasks.ENDPOINTS,
}
