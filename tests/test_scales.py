from timeline.config import TimelineConfig
from timeline.plot.scales import LinearScale, compute_plot_scales, inverse_lerp


def test_linear_scale():
    scale = LinearScale(domain=(0, 100), range=(20, 220))

    assert scale(0) == 20
    assert scale(50) == 120
    assert scale.invert(120) == 50
    # extrapolates unless clamped
    assert scale(150) == 320
    assert LinearScale(domain=(0, 100), range=(20, 220), clamp=True)(150) == 220


def test_rounding_half_up():
    scale = LinearScale(domain=(0, 4), range=(0, 2), round=True)

    assert scale(1) == 1        # 0.5
    assert scale(3) == 2        # 1.5


def test_degenerate_domain_maps_to_middle():
    assert inverse_lerp(5, 5, 5) == 0.5
    assert LinearScale(domain=(7, 7), range=(0, 100))(7) == 50


def test_plot_scales_with_room():
    scales = compute_plot_scales(1200, 600, (0, 100), 10, TimelineConfig())

    assert scales.x(0) == 20
    assert scales.x(100) == 1180
    # bottom 576.5, nine gaps of size + margin = 6
    assert scales.y(1) == 577
    assert scales.y(10) == 523
    assert scales.point_margin == 3


def test_plot_scales_crowded():
    scales = compute_plot_scales(1200, 600, (0, 100), 1000, TimelineConfig())

    # no margin fits: the axis takes the whole height
    assert scales.point_margin == 0
    assert scales.y(1) == 577
    assert scales.y(1000) == 20


def test_plot_scales_margin_shrinks():
    # 101 ranks in 556.5px: size 3 + margin 2 = 500px fits, margin 3 does not
    scales = compute_plot_scales(1200, 600, (0, 100), 101, TimelineConfig())

    assert scales.point_margin == 2
    assert scales.y(101) == 77
