from .httpstatus import DELETE, GET, PATCH, POST, PUT

METHODS = [GET, POST, PUT, PATCH, DELETE]


def response_argument_spec() -> dict:
    return dict(
        status_code=dict(type='int', default=0),
        body=dict(type='str', default=''),
        headers=dict(type='dict', default={}),
    )


def mapping_argument_spec() -> dict:
    return dict(
        method=dict(type='str', required=True, choices=METHODS),
        url=dict(type='str', required=True),
        body=dict(type='raw'),
        headers=dict(type='dict', default={}),
        compare_type=dict(type='str', default=''),
    )


def observe_argument_spec(spec=None) -> dict:
    arg_spec = dict(
        name=dict(type='str', default=''),
        mappings=dict(
            type='list', elements='dict', required=True,
            options=mapping_argument_spec()),
        payload=dict(
            type='dict', default={},
            options=dict(
                base_url=dict(type='str', default=''),
                body=dict(type='raw'),
            )),
        headers=dict(type='dict', default={}),
        insecure_skip_tls_verify=dict(type='bool', default=False),
        status=dict(
            type='dict', required=True,
            options=dict(
                response=dict(
                    type='dict', required=True,
                    options=response_argument_spec()),
                method=dict(type='str', default='', choices=METHODS + ['']),
            )),
    )
    if spec:
        arg_spec.update(spec)
    return arg_spec


def compare_argument_spec() -> dict:
    return dict(
        response=dict(type='dict', required=True, options=response_argument_spec()),
        desired=dict(type='str', required=True),
        compare_type=dict(type='str', default=''),
    )
