from ball_sim.scene import Scene
from ball_sim.config import SimConfig
from ball_sim.types import Body, Circle
from ball_sim.invariants import kinetic_energy, linear_momentum

scene = Scene(config=SimConfig(gravity=(0, 0)))

m1, m2 = 20.0, 40.0
a = Body(Circle(20.0), mass=m1, position=(200.0, 240.0), velocity=(+100.0, 0.0))
b = Body(Circle(20.0), mass=m2, position=(400.0, 240.0), velocity=(-50.0, 0.0))
scene.add_body(a); scene.add_body(b)

p0 = linear_momentum(scene.bodies)
ke0 = kinetic_energy(scene.bodies)

for _ in range(120):
    scene.step(1 / 120)

p1 = linear_momentum(scene.bodies)
ke1 = kinetic_energy(scene.bodies)

print("p0", p0, "p1", p1, "dp", p1 - p0)
print("ke0", ke0, "ke1", ke1, "dke", ke1 - ke0)
print("v_final a,b:", a.velocity, b.velocity)
