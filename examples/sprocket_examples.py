"""

Parametric Hub Sprockets Examples

name: sprocket_examples.py
by:   Gumyr
date: October 19th 2026

desc: Sprocket creation examples

license:

    Copyright 2026 Gumyr

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

"""
import logging
import cadquery as cq
from cq_sprocket import (
    Sprocket,
    SprocketConfig,
    PrintTolerances,
    generate_sprocket,
    generate_plain_hole,
)

logging.basicConfig(level=logging.INFO)

#
# Create a set of sprockets for these examples
print("Creating sprockets...")
sprocket25, warnings25 = generate_sprocket(
    SprocketConfig(chain_size=25, teeth=9, bore_diameter=5 / 16)
)
sprocket40 = Sprocket(
    SprocketConfig(
        chain_size=40,
        teeth=20,
        bore_diameter=1.0,
        hub_diameter=1.75,
        hub_height=0.75,
        keyway=True,
        setscrew=True,
        keyway_setscrew=True,
    )
)
# A loose fitting sprocket with holes to be tapped after printing
sprocket420, warnings420 = generate_sprocket(
    SprocketConfig(
        chain_size=420,
        teeth=14,
        bore_diameter=0.75,
        hub_diameter=1.25,
        hub_height=0.5,
        setscrew=True,
    ),
    tolerances=PrintTolerances(bore=0.3, roller=0.2, teeth=0.1),
    thread_maker=generate_plain_hole,
)
for warning in warnings25 + sprocket40.warnings + warnings420:
    print(warning)

cq.exporters.export(sprocket25, "sprocket25.step")
cq.exporters.export(sprocket40, "sprocket40.step")
cq.exporters.export(sprocket420, "sprocket420.stl")
print(
    f"The #40 sprocket has {sprocket40.config.teeth} teeth and a pitch radius of "
    f"{round(sprocket40.pitch_radius,1)}mm"
)

# If running from within the cq-editor, show the sprockets
if "show_object" in locals():
    show_object(sprocket25, name="sprocket25")
    show_object(sprocket40, name="sprocket40")
    show_object(sprocket420, name="sprocket420")
