# constants.py
# Names of the config elements understood by the create-shoot and
# gen-provider steps, plus the fixed values this package fills in.

ConfigShootName = "SHOOT_NAME"
ConfigProjectNamespaceName = "PROJECT_NAMESPACE"
ConfigK8sVersionName = "K8S_VERSION"
ConfigSeedName = "SEED"
ConfigShootAnnotations = "SHOOT_ANNOTATIONS"
ConfigAllowPrivilegedContainers = "ALLOW_PRIVILEGED_CONTAINERS"

ConfigCloudproviderName = "CLOUDPROVIDER"
ConfigProviderTypeName = "PROVIDER_TYPE"
ConfigCloudprofileName = "CLOUDPROFILE"
ConfigSecretBindingName = "SECRET_BINDING"
ConfigRegionName = "REGION"
ConfigZoneName = "ZONE"

ConfigControlplaneProviderPathName = "CONTROLPLANE_PROVIDER_CONFIG_FILEPATH"
ConfigInfrastructureProviderPathName = "INFRASTRUCTURE_PROVIDER_CONFIG_FILEPATH"

ConfigSeedValue = "aws-eu1"
ConfigControlplaneProviderPath = "/tmp/tm/shared/generators/controlplane.yaml"
ConfigInfrastructureProviderPath = "/tmp/tm/shared/generators/infra.yaml"

CREATE_SHOOT_DEFINITION = "create-shoot"
GEN_STEP_SUFFIX = "-gen"
