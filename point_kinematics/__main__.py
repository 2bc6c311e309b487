import sys

from point_kinematics.cli import main

sys.exit(main())
