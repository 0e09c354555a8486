import numpy as np
import pandas as pd
import pytest

from invaders import InvadersEnv
from rl.configs.invaders_config import get_reward_config, REWARD_CONFIG_BASELINE
from rl.metrics_callback import MetricsCallback, CSV_COLUMNS
from rl.plot_results import smooth, load_metrics, generate_summary_report
from rl.train import MultiDiscreteToDiscreteWrapper


def test_get_reward_config():
    assert get_reward_config("baseline") is REWARD_CONFIG_BASELINE
    with pytest.raises(ValueError):
        get_reward_config("reckless")


def test_discrete_wrapper_covers_every_action():
    env = MultiDiscreteToDiscreteWrapper(InvadersEnv())
    assert env.action_space.n == 6
    decoded = {tuple(env.action(i)) for i in range(6)}
    assert decoded == {(m, a) for m in range(3) for a in range(2)}
    assert tuple(env.action(5)) == (2, 1)


def test_metrics_callback_writes_csv(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    cb._on_training_start()
    for i in range(3):
        cb.record_episode({
            "episode": {"r": float(i), "l": 100 + i},
            "score": 40 * i, "level": 1 + i, "enemies_killed": i,
            "lives_lost": 3, "levels_cleared": i,
        })
    cb._on_training_end()

    df = pd.read_csv(tmp_path / "ppo_metrics.csv")
    assert list(df.columns) == CSV_COLUMNS
    assert df["score"].tolist() == [0, 40, 80]
    assert df["episode"].tolist() == [1, 2, 3]

    summary = cb.get_summary()
    assert summary["total_episodes"] == 3
    assert summary["max_level"] == 3
    assert summary["mean_score"] == pytest.approx(40)


def test_smooth_keeps_short_series():
    data = np.arange(3, dtype=float)
    np.testing.assert_array_equal(smooth(data, window=10), data)
    assert len(smooth(np.ones(20), window=5)) == 16


def test_summary_report_from_metrics(tmp_path):
    rows = [[i * 100, i + 1, float(i), 500, 40 * i, 1 + i // 2, i, 3, i // 2] for i in range(5)]
    pd.DataFrame(rows, columns=CSV_COLUMNS).to_csv(tmp_path / "dqn_metrics.csv", index=False)

    df = load_metrics(str(tmp_path), "dqn")
    assert len(df) == 5
    assert load_metrics(str(tmp_path), "ppo") is None

    path = generate_summary_report({"dqn": df}, str(tmp_path / "plots"))
    text = open(path).read()
    assert "DQN Results" in text
    assert "Best Score: 160" in text
