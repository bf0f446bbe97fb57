"""Snapshot and repository endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_MASTER = {'master_timeout': 'time'}

ENDPOINTS = {
    'snapshot.create': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {'path': '/_snapshot/{repository}/{snapshot}', 'methods': ['PUT', 'POST']}
            ]
        },
        'params': {**_MASTER, 'wait_for_completion': 'boolean'},
        'body': {'description': 'The snapshot definition'},
    },
    'snapshot.create_repository': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {'paths': [{'path': '/_snapshot/{repository}', 'methods': ['PUT', 'POST']}]},
        'params': {**_MASTER, 'timeout': 'time', 'verify': 'boolean'},
        'body': {'description': 'The repository definition', 'required': True},
    },
    'snapshot.delete': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [{'path': '/_snapshot/{repository}/{snapshot}', 'methods': ['DELETE']}]
        },
        'params': _MASTER,
    },
    'snapshot.delete_repository': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {
                    'path': '/_snapshot/{repository}',
                    'methods': ['DELETE'],
                    'parts': {'repository': 'list'},
                }
            ]
        },
        'params': {**_MASTER, 'timeout': 'time'},
    },
    'snapshot.get': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {
                    'path': '/_snapshot/{repository}/{snapshot}',
                    'methods': ['GET'],
                    'parts': {'repository': 'string', 'snapshot': 'list'},
                }
            ]
        },
        'params': {**_MASTER, 'ignore_unavailable': 'boolean', 'verbose': 'boolean'},
    },
    'snapshot.get_repository': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {'path': '/_snapshot', 'methods': ['GET']},
                {
                    'path': '/_snapshot/{repository}',
                    'methods': ['GET'],
                    'parts': {'repository': 'list'},
                },
            ]
        },
        'params': {**_MASTER, 'local': 'boolean'},
    },
    'snapshot.restore': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {'path': '/_snapshot/{repository}/{snapshot}/_restore', 'methods': ['POST']}
            ]
        },
        'params': {**_MASTER, 'wait_for_completion': 'boolean'},
        'body': {'description': 'Details of what to restore'},
    },
    'snapshot.status': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [
                {'path': '/_snapshot/_status', 'methods': ['GET']},
                {
                    'path': '/_snapshot/{repository}/_status',
                    'methods': ['GET'],
                    'parts': {'repository': 'list'},
                },
                {
                    'path': '/_snapshot/{repository}/{snapshot}/_status',
                    'methods': ['GET'],
                    'parts': {'repository': 'list', 'snapshot': 'list'},
                },
            ]
        },
        'params': {**_MASTER, 'ignore_unavailable': 'boolean'},
    },
    'snapshot.verify_repository': {
        'documentation': f'{_DOCS}/modules-snapshots.html',
        'url': {
            'paths': [{'path': '/_snapshot/{repository}/_verify', 'methods': ['POST']}]
        },
        'params': {**_MASTER, 'timeout': 'time'},
    },
}
