"""Node level endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_NODE_PARTS = {'node_id': 'list', 'metric': 'list', 'index_metric': 'list'}


def _paths(*templates):
    return {
        'paths': [
            {'path': t, 'methods': ['GET'], 'parts': _NODE_PARTS} for t in templates
        ]
    }


ENDPOINTS = {
    'nodes.hot_threads': {
        'documentation': f'{_DOCS}/cluster-nodes-hot-threads.html',
        'url': _paths('/_nodes/hot_threads', '/_nodes/{node_id}/hot_threads'),
        'params': {
            'ignore_idle_threads': 'boolean',
            'interval': 'time',
            'snapshots': 'number',
            'threads': 'number',
            'timeout': 'time',
            'type': 'enum',
        },
    },
    'nodes.info': {
        'documentation': f'{_DOCS}/cluster-nodes-info.html',
        'url': _paths(
            '/_nodes',
            '/_nodes/{node_id}',
            '/_nodes/{metric}',
            '/_nodes/{node_id}/{metric}',
        ),
        'params': {'flat_settings': 'boolean', 'timeout': 'time'},
    },
    'nodes.stats': {
        'documentation': f'{_DOCS}/cluster-nodes-stats.html',
        'url': _paths(
            '/_nodes/stats',
            '/_nodes/{node_id}/stats',
            '/_nodes/stats/{metric}',
            '/_nodes/{node_id}/stats/{metric}',
            '/_nodes/stats/{metric}/{index_metric}',
            '/_nodes/{node_id}/stats/{metric}/{index_metric}',
        ),
        'params': {
            'completion_fields': 'list',
            'fielddata_fields': 'list',
            'fields': 'list',
            'groups': 'boolean',
            'include_segment_file_sizes': 'boolean',
            'level': 'enum',
            'timeout': 'time',
            'types': 'list',
        },
    },
    'nodes.usage': {
        'documentation': f'{_DOCS}/cluster-nodes-usage.html',
        'url': _paths(
            '/_nodes/usage',
            '/_nodes/{node_id}/usage',
            '/_nodes/usage/{metric}',
            '/_nodes/{node_id}/usage/{metric}',
        ),
        'params': {'timeout': 'time'},
    },
}
