OAM_VERSION = "core.oam.dev/v1beta1"
APPLICATION_KIND = "Application"
VERSION_ANNOTATION_KEY = "version"
DESCRIPTION_ANNOTATION_KEY = "description"
LINK_TRAIT = "link"
COMPONENT_TYPE = "component"
CAPABILITY_TYPE = "capability"
FILE_PREFIX = "file://"
OCI_PREFIX = "oci://"
