# spinapp

Building blocks for hosting component-based web applications. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

- `spinapp.keys`: `Key` and `validate_key` check configuration keys. A key
  starts with a lowercase ASCII letter, ends with a letter or digit, and holds
  only lowercase letters, digits and single underscores. The errors raised
  during configuration work all derive from `ConfigError`:
  `InvalidKeyError`, `InvalidPathError`, `InvalidSchemaError`,
  `InvalidTemplateError`, `ProviderError` and `UnknownPathError`.
- `spinapp.template`: `Template` parses text with `{{ expr }}` expressions
  into `Literal` and `Expr` parts; an unmatched `{{` raises
  `InvalidTemplateError`.
- `spinapp.tree`: `TreePath` is a dotted path of keys (`size()`, `keys()`,
  `resolve_relative(".x")`, `path + key`). `Slot` holds an optional default
  template and a secret flag; its `repr` hides secret defaults. `Tree` maps
  paths to slots; build one with `Tree.from_mapping`, and add to it with
  `merge` and `merge_defaults`. A slot with no default must be marked
  `required`, and merging a path twice raises `InvalidPathError`.
- `spinapp.providers`: `Provider` is the interface for value sources;
  `EnvProvider(prefix, environ)` reads `<PREFIX>_<KEY>` from the environment
  (or from the given mapping). The default prefix is `SPIN_APP`.
- `spinapp.resolver`: `Resolver(tree)` resolves a path. For a top-level path
  the providers are asked first, in the order they were added; otherwise the
  slot's default template is expanded, following references to other paths
  (absolute, or relative with leading dots). Reference chains deeper than 100
  raise `InvalidTemplateError`.
- `spinapp.component_config`: `ComponentConfig(component_id, resolver)`
  resolves keys below a component's own path with `get_config(key)`.

```python
from spinapp.tree import Tree, TreePath
from spinapp.resolver import Resolver
from spinapp.providers import EnvProvider

tree = Tree.from_mapping({
    "greeting": {"default": "hello"},
    "message": {"default": "{{ greeting }}, world"},
})
tree.merge_defaults(TreePath("web"), {"title": "{{ message }}!"})

resolver = Resolver(tree)
resolver.add_provider(EnvProvider("SPIN_APP", None))
print(resolver.resolve(TreePath("web.title")))  # hello, world!
```

With `EnvProvider`, setting `SPIN_APP_GREETING=hi` changes the result above
to `hi, world!`.

## HTTP routing and request preparation

- `spinapp.routes`: `RoutePattern.from_parts(base, path)` builds an exact
  route, or a wildcard route when the path ends in `/...`. `matches(path)`
  ignores one trailing slash; `relative(uri)` returns the path after the
  matched prefix. `Router` tries its routes in order and returns the
  component of the last match, or raises `RouteNotFoundError`.
- `spinapp.headers`: `compute_default_headers(uri, raw, base, host)` returns
  the path info, full URL, matched route, base path and component routes as
  `(HeaderName, value)` pairs; each `HeaderName` has a `spin` and a `wagi`
  name. `absolute_uri(uri, scheme, host)` rebuilds a request URI with the
  given scheme and host (`localhost` by default).
- `spinapp.spin_request`: `request_headers` returns a request's headers
  followed by the default headers under lowercase, dash-separated keys
  (`prepare_header_key`); `query_params` decodes the query string;
  `valid_status` accepts statuses from 100 to 600.
- `spinapp.wagi_request`: `wagi_argv(template, path, query)` fills in
  `${SCRIPT_NAME}` and `${ARGS}` (default template `DEFAULT_ARGV`) and splits
  on spaces; `wagi_environment` returns the default headers as environment
  variables.

```python
from spinapp.routes import RoutePattern, Router
from spinapp.wagi_request import wagi_argv

router = Router({
    RoutePattern.from_parts("/", "/static/..."): "files",
    RoutePattern.from_parts("/", "/api"): "api",
})
router.route("/static/img/logo.png")  # "files"
RoutePattern.from_parts("/", "/static/...").relative("/static/img/logo.png")  # "/img/logo.png"
wagi_argv("${SCRIPT_NAME} ${ARGS}", "/test", "abc=def")  # ["/test", "abc=def"]
```

## Assets

- `spinapp.assets`: `create_dir(base, component_id)` makes
  `base/assets/<component_dir(id)>`, a name built from the sanitized id and
  its SHA-256 (`sha256_hex`). `to_relative`, `is_under`, `ensure_under` and
  `ensure_all_under` check that paths stay inside a directory, raising
  `AssetError` when they do not.
- `spinapp.file_mounts`: `parse_file_mount` reads one `files` entry, either a
  glob pattern or a `{source, destination}` table (`DirectoryPlacement`).
  `collect(raw_mounts, rel)` turns them into `FileMount`s, `copy_all` copies
  them, and `prepare_component(raw_mounts, src, base_dst, component_id)` does
  both and returns a `DirectoryMount` at guest path `/`.
- `spinapp.invoice`: `Invoice.from_mapping` reads a parsed invoice into
  `Invoice`, `Parcel` and `Label`; `find_manifest` returns the SHA-256 of the
  one parcel with media type `SPIN_MANIFEST_MEDIA_TYPE`, and
  `parcels_in_group` / `is_member` select parcels by group.

## What this package does not do

It has no HTTP server and no command-line tool, and it does not run
components: it prepares the routes, headers, arguments, environment,
configuration and files a host would hand to them. It does not read
application manifest files or fetch invoices and parcels from a server; the
caller supplies the parsed data.