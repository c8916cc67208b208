PLAN_KIND = "Plan"
PLAN_API_VERSION = "move2kube.konveyor.io/v1alpha1"
DEFAULT_PROJECT_NAME = "myproject"
DEFAULT_CLUSTER_TYPE = "Kubernetes"
