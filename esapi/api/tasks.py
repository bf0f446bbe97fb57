"""Task management endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

ENDPOINTS = {
    'tasks.cancel': {
        'documentation': f'{_DOCS}/tasks.html',
        'url': {
            'paths': [
                {'path': '/_tasks/_cancel', 'methods': ['POST']},
                {'path': '/_tasks/{task_id}/_cancel', 'methods': ['POST']},
            ]
        },
        'params': {
            'actions': 'list',
            'nodes': 'list',
            'parent_task_id': 'string',
        },
    },
    'tasks.get': {
        'documentation': f'{_DOCS}/tasks.html',
        'url': {'paths': [{'path': '/_tasks/{task_id}', 'methods': ['GET']}]},
        'params': {'timeout': 'time', 'wait_for_completion': 'boolean'},
    },
    'tasks.list': {
        'documentation': f'{_DOCS}/tasks.html',
        'url': {'paths': [{'path': '/_tasks', 'methods': ['GET']}]},
        'params': {
            'actions': 'list',
            'detailed': 'boolean',
            'group_by': 'enum',
            'nodes': 'list',
            'parent_task_id': 'string',
            'timeout': 'time',
            'wait_for_completion': 'boolean',
        },
    },
}
