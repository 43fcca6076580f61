# Services package
#
# - github: GitHub REST reads, identity resolution, OAuth exchange
# - activity: Dashboard activity aggregation, filtering and summaries
# - interpreter: Base class for Claude-backed interpreters
