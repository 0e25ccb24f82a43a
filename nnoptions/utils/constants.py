"""
constants.py — Constants used across nnoptions

This module contains the default values of every option record, the
supported dimensionalities of the generic pooling records, and the logging
configuration used by the command-line interface.
"""

# ============================================================================
# Dimensionality
# ============================================================================

MIN_DIMS = 1
MAX_DIMS = 3
SUPPORTED_DIMS = (1, 2, 3)

# ============================================================================
# Activation Defaults
# ============================================================================

DEFAULT_INPLACE = False
DEFAULT_ELU_ALPHA = 1.0
DEFAULT_CELU_ALPHA = 1.0
DEFAULT_GLU_DIM = -1
DEFAULT_SHRINK_LAMBDA = 0.5
DEFAULT_HARDTANH_MIN_VAL = -1.0
DEFAULT_HARDTANH_MAX_VAL = 1.0
DEFAULT_LEAKY_RELU_NEGATIVE_SLOPE = 1e-2
DEFAULT_PRELU_NUM_PARAMETERS = 1
DEFAULT_PRELU_INIT = 0.25
DEFAULT_RRELU_LOWER = 1.0 / 8.0
DEFAULT_RRELU_UPPER = 1.0 / 3.0
DEFAULT_RRELU_TRAINING = False
DEFAULT_SOFTPLUS_BETA = 1.0
DEFAULT_SOFTPLUS_THRESHOLD = 20.0

# ============================================================================
# Gumbel Softmax Defaults
# ============================================================================

DEFAULT_GUMBEL_TAU = 1.0
DEFAULT_GUMBEL_HARD = False
DEFAULT_GUMBEL_DIM = -1

# ============================================================================
# Attention Defaults
# ============================================================================

DEFAULT_ATTENTION_DROPOUT = 0.0
DEFAULT_ATTENTION_BIAS = True
DEFAULT_ATTENTION_ADD_BIAS_KV = False
DEFAULT_ATTENTION_ADD_ZERO_ATTN = False
DEFAULT_ATTENTION_TRAINING = True
DEFAULT_ATTENTION_NEED_WEIGHTS = True
DEFAULT_ATTENTION_SEPARATE_PROJ = False

# ============================================================================
# Pooling Defaults
# ============================================================================

DEFAULT_POOL_PADDING = 0
DEFAULT_POOL_DILATION = 1
DEFAULT_POOL_CEIL_MODE = False
DEFAULT_POOL_COUNT_INCLUDE_PAD = True

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# ============================================================================
# CLI
# ============================================================================

PROG_NAME = 'nnoptions'
FIELD_ASSIGNMENT_SEP = '='
TORCH_DTYPE_PREFIX = 'torch.'
