# Feeping Creaturism:
#
# this is the all important version number used by pip.
#
#
"""
Version History:

0.1.0    - 6/12/2017 initial birth as a pip package; javac then toplc, javac's
           stderr replayed afterwards.

0.1.1    - 6/19/2017 @argfile support (what Infer produces now, at least).

0.1.2    - 7/3/2017 files ending in .java.topl are handed to toplc via -e so
           they get compiled after the monitor exists.

0.1.3    - 7/21/2017 javac's stdout and stderr share one file; slight variations
           of this deadlocked.

0.2.0    - 9/8/2017 stream policies are explicit; the pipeline is a sequence of
           stages over an immutable state.

0.2.1    - 10/2/2017 logging and tool names configurable through the environment,
           topljavac-sanity-checker.

0.2.2    - 11/14/2017 scratch files are removed after a successful run.

"""

topljavac_version = '0.2.2'
topljavac_date = 'November 14 2017'
