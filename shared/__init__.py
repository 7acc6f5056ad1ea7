"""
Reusable pieces of the blog acceptance suite.

- settings: where the application under test lives
- live_stack: locating or starting the application
- seed: resetting and seeding the backend over HTTP
- session: the logged-out / logged-in state model
- dialogs: handling confirmation dialogs
- assertions: bounded-wait UI checks and list-ordering checks
- scenario: declarative scenarios and their runner
"""
