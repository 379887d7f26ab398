"""Central constants for the xfa_json project."""

# Stdin and files are decoded with 'utf-8-sig' so a leading BOM written by
# Windows tooling does not reach the XML parser.
XML_ENCODING = "utf-8-sig"

# XFA data namespace used to recognise the <xfa:data> island.
XFA_DATA_NS = "http://www.xfa.org/schema/xfa-data/1.0/"
DATA_TAG = "data"
DATASETS_TAG = "datasets"

# Containers that describe the data rather than carry it.
SKIPPED_CONTAINERS = ("schema", "datamodel", "dataDescription")

# Reserved keys in converted objects.
ATTRIBUTES_KEY = "_attributes"
VALUE_KEY = "_value"

# Attribute names starting with this are namespace declarations.
XMLNS_PREFIX = "xmlns"

# Top-level fields whose name starts with one of these are system fields.
METADATA_PREFIXES = (
    "FS",
    "fs",
    "_",
    "TEMPLATE",
    "QUERY",
    "TRANSFORMATION",
    "template",
    "config",
    "xdp",
)

# Name fragments that mark a field as a candidate option/lookup list.
LOOKUP_PATTERNS = (
    "List",
    "Options",
    "Choices",
    "Lookup",
    "Reference",
    "Country",
    "Port",
    "State",
    "City",
    "Dropdown",
)

# A lookup candidate is dropped when it holds an array longer than this.
LOOKUP_MIN_ITEMS = 10

# The only wrapper whose direct members are filtered for lookup lists too.
FORM_TAG = "Form"

JSON_INDENT = 2

# CLI exit codes
EXIT_OK = 0
EXIT_USAGE = 2  # click usage errors
EXIT_INPUT = 3
EXIT_CONVERSION = 4
