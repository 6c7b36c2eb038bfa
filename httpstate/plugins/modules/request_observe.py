#!/usr/bin/python
# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: request_observe
short_description: Determine whether an HTTP resource is up to date.
description:
    - Fetches the current state of a resource with its GET mapping and
    - compares it with the body its PUT mapping renders.
    - Never changes anything on the remote.
    - Mapping templates are Jinja2 and can use C(name), C(payload.baseUrl),
    - C(payload.body), C(response.statusCode), C(response.body) and
    - C(response.headers). C(response.body) is parsed when it holds a JSON object.
    - Play variables C(httpstate_timeout) and C(httpstate_headers) set the
    - request timeout and headers added to every request.
options:
  name:
    description:
      - A name for the resource, used in output.
    type: str
  mappings:
    description:
      - Request rendering rules, one per HTTP method.
      - A GET and a PUT mapping are required for observation.
    required: true
    type: list
    elements: dict
    suboptions:
      method:
        description:
          - The HTTP method this mapping renders.
        required: true
        type: str
        choices: [ GET, POST, PUT, PATCH, DELETE ]
      url:
        description:
          - URL template.
        required: true
        type: str
      body:
        description:
          - Body template, either a string or a structure whose strings
          - are templates. Structures are sent as JSON.
        type: raw
      headers:
        description:
          - Header templates, keyed by name. Values may be lists.
        type: dict
      compare_type:
        description:
          - How the response is compared with the desired state.
          - The first mapping with a non-empty compare type sets it for the
          - whole resource.
          - Unknown types use the default comparison.
        type: str
        choices: [ '', gitlab-file, harbor-robot ]
  payload:
    description:
      - Data exposed to the templates.
    type: dict
    suboptions:
      base_url:
        type: str
      body:
        type: raw
  headers:
    description:
      - Headers sent with every request of this resource.
    type: dict
  insecure_skip_tls_verify:
    description:
      - Skip TLS certificate validation.
    type: bool
    default: false
  status:
    description:
      - The last recorded response for the resource.
    required: true
    type: dict
    suboptions:
      response:
        required: true
        type: dict
        suboptions:
          status_code:
            type: int
          body:
            type: str
          headers:
            type: dict
      method:
        description:
          - The method of the request that produced the response.
        type: str
'''

EXAMPLES = r'''
- name: Check whether a user is up to date.
  declarative.httpstate.request_observe:
    name: user-1
    payload:
      base_url: https://api.example.com/users
      body:
        username: jdoe
        email: jdoe@example.com
    mappings:
      - method: GET
        url: "{{ '{{ payload.baseUrl }}/{{ response.body.id }}' }}"
      - method: PUT
        url: "{{ '{{ payload.baseUrl }}/{{ response.body.id }}' }}"
        body:
          username: "{{ '{{ payload.body.username }}' }}"
          email: "{{ '{{ payload.body.email }}' }}"
    status:
      method: POST
      response: "{{ create_res.details }}"
  register: observe_res

- name: Compare a GitLab file by content digest.
  declarative.httpstate.request_observe:
    mappings:
      - method: GET
        url: https://gitlab.example.com/api/v4/projects/1/repository/files/README.md?ref=main
        compare_type: gitlab-file
      - method: PUT
        url: https://gitlab.example.com/api/v4/projects/1/repository/files/README.md
        body: '{"branch": "main", "content": "hello"}'
    status:
      response: "{{ last_response }}"
'''

RETURN = r'''
synced:
  description: Whether the remote resource matches the desired state.
  type: bool
found:
  description: False when the resource has no valid previous response or the remote reports it as not found.
  type: bool
details:
  description: The GET response (status_code, body, headers).
  type: dict
response_error:
  description: The transport error of the GET request, if any.
  type: str
error_kind:
  description: Set when the task fails; one of mapping_not_found, not_valid_json, invalid_field_type, invalid_request_details, template_error.
  type: str
'''
